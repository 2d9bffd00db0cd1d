# buildings.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Index, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Building(Base):
    __tablename__ = "buildings"
    __table_args__ = (
        Index("ix_building_user_created", "user_id", "created_at"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(64), nullable=False)
    name = Column(String(128), nullable=False)
    address = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True),
                        default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    units = relationship("Unit", back_populates="building",
                         cascade="all, delete-orphan")
