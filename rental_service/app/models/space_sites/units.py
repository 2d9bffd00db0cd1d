import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Unit(Base):
    __tablename__ = "units"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(64), nullable=False, index=True)
    building_id = Column(Uuid(as_uuid=True), ForeignKey(
        "buildings.id", ondelete="CASCADE"), nullable=False)
    unit_number = Column(String(32), nullable=False)
    type = Column(String(16), default="apartment")  # apartment|garage
    surface = Column(Numeric(10, 2), default=0)
    rooms = Column(Integer, default=0)
    status = Column(String(16), default="free")  # free|occupied
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True),
                        default=datetime.utcnow, onupdate=datetime.utcnow)

    building = relationship("Building", back_populates="units")
