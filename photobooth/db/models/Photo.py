# photobooth/db/models/Photo.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from photobooth.db.base import Base
from datetime import datetime


class Photo(Base):
    __tablename__ = 'photos'

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    blob_id = Column(String(255), unique=True, nullable=False)
    object_id = Column(String(255), nullable=False)
    event_id = Column(Integer, ForeignKey('events.id', ondelete='CASCADE'), nullable=False)
    user = Column(String(255), nullable=True)

    event = relationship("Event", back_populates="photos")

    def __repr__(self):
        return f"<Photo(id={self.id}, blob_id={self.blob_id})>"
