"""
Post model for planned and published social media content.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    caption = Column(Text)
    media_url = Column(String(1000))
    media_urls = Column(JSON, default=list)
    media_type = Column(String(20), default="image")  # image, video, carousel
    # Kept as submitted (YYYY-MM-DD); views parse leniently
    scheduled_date = Column(String(40), index=True)
    scheduled_time = Column(String(10))
    status = Column(String(20), default="idea", index=True)  # idea, production, approved, scheduled, posted
    platform = Column(String(20), default="instagram")  # instagram, facebook, tiktok, linkedin, twitter
    comments = Column(JSON, default=list)  # [{author, text, date}]
    created_date = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_date = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    client = relationship("Client", back_populates="posts")
