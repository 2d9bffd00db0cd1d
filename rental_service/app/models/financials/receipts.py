import uuid
from datetime import datetime
from sqlalchemy import (
    Column, String, Date, Numeric, Text, DateTime, JSON, Uuid, UniqueConstraint
)
from shared.core.database import Base


class Receipt(Base):
    """A quittance de loyer. The total is derived, never stored."""
    __tablename__ = "receipts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(String(64), nullable=False, index=True)
    receipt_number = Column(String(32), nullable=False)
    landlord_name = Column(String(255), nullable=False, default="")
    tenant_name = Column(String(255), nullable=False, default="")
    property_address = Column(Text, nullable=False, default="")
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    base_rent = Column(Numeric(12, 2), nullable=False, default=0)
    janitor_charge = Column(Numeric(12, 2), nullable=False, default=0)
    electricity_charge = Column(Numeric(12, 2), nullable=False, default=0)
    water_charge = Column(Numeric(12, 2), nullable=False, default=0)
    # ordered [{"label": ..., "amount": ...}]
    extra_charges = Column(JSON, nullable=False, default=list)
    signatory_city = Column(String(128), nullable=False, default="")
    issue_date = Column(Date, nullable=False)
    # python-side defaults keep sub-second ordering of the owner listing
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True),
                        default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "receipt_number",
                         name="uq_receipt_user_number"),
    )
