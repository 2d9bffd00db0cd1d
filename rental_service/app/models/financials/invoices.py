import uuid
from datetime import datetime
from sqlalchemy import (
    Boolean, Column, String, Integer, Date, Numeric, DateTime, Uuid
)
from shared.core.database import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(64), nullable=False, index=True)
    contract_id = Column(Uuid(as_uuid=True), nullable=True)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    base_rent = Column(Numeric(12, 2), nullable=False, default=0)
    electricity = Column(Numeric(12, 2), nullable=False, default=0)
    water = Column(Numeric(12, 2), nullable=False, default=0)
    stair_cleaning = Column(Numeric(12, 2), nullable=False, default=0)
    other_services = Column(Numeric(12, 2), nullable=False, default=0)
    is_paid = Column(Boolean, default=False, nullable=False)
    paid_date = Column(Date)
    due_date = Column(Date, nullable=False)
    document_url = Column(String(1024))
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True),
                        default=datetime.utcnow, onupdate=datetime.utcnow)
