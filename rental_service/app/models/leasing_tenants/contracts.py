import uuid
from datetime import datetime
from sqlalchemy import Column, String, Date, Numeric, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(64), nullable=False, index=True)
    tenant_id = Column(Uuid(as_uuid=True), ForeignKey(
        "tenants.id", ondelete="CASCADE"), nullable=False)
    unit_id = Column(Uuid(as_uuid=True), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    rent_amount = Column(Numeric(12, 2), nullable=False, default=0)
    deposit = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(String(16), default="active")  # active|inactive
    document_url = Column(String(1024))
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True),
                        default=datetime.utcnow, onupdate=datetime.utcnow)

    tenant = relationship("Tenant", back_populates="contracts")
