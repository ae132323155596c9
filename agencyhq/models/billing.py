"""
Billing model for client charges.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class Billing(Base):
    __tablename__ = "billings"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(String(255))
    amount = Column(Float, default=0)
    due_date = Column(String(40), index=True)
    # Stored status only; overdue is derived at read time
    status = Column(String(20), default="pending", index=True)  # pending, paid, overdue, cancelled
    recurrence = Column(String(20), default="monthly")  # once, monthly, quarterly, yearly
    payment_date = Column(String(40))
    notes = Column(Text)
    created_date = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_date = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    client = relationship("Client", back_populates="billings")
