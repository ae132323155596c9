"""
Client model for the brands an agency manages.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String(200), nullable=False)
    user_email = Column(String(255), index=True)  # login email of the client portal user
    status = Column(String(20), default="active", index=True)  # active, inactive
    company_objective = Column(Text)
    products_services = Column(Text)
    target_audience = Column(Text)
    brand_voice = Column(String(50))
    brand_voice_custom = Column(Text)
    logo_url = Column(String(1000))
    created_date = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_date = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    posts = relationship("Post", back_populates="client", cascade="all, delete-orphan")
    reports = relationship("Report", back_populates="client", cascade="all, delete-orphan")
    billings = relationship("Billing", back_populates="client", cascade="all, delete-orphan")
