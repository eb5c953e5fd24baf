# photobooth/db/models/Event.py
from sqlalchemy import Column, Integer, DateTime, String, ForeignKey
from sqlalchemy.orm import relationship
from photobooth.db.base import Base
from datetime import datetime
from photobooth.db.models.Photo import Photo

class Event(Base):
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    event_title = Column(String(255), nullable=False)
    event_date = Column(DateTime, nullable=False)
    admin_id = Column(Integer, ForeignKey('admins.id', ondelete='CASCADE'), nullable=False)

    admin = relationship("Admin", back_populates="events")
    photos = relationship("Photo", back_populates="event", cascade="all, delete")

    def __repr__(self):
        return f"<Event(id={self.id}, title={self.event_title})>"
