"""
Report model for periodic performance metrics.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class Report(Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    period_start = Column(String(40))
    period_end = Column(String(40), index=True)
    followers_gained = Column(Integer, default=0)
    total_impressions = Column(Integer, default=0)
    total_reach = Column(Integer, default=0)
    total_messages = Column(Integer, default=0)
    bio_link_clicks = Column(Integer, default=0)
    engagement_rate = Column(Float, default=0)
    notes = Column(Text)
    created_date = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # Relationships
    client = relationship("Client", back_populates="reports")
