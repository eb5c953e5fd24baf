# photobooth/db/models/Admin.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from photobooth.db.base import Base
from photobooth.db.models.Event import Event

class Admin(Base):
    __tablename__ = 'admins'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)

    events = relationship("Event", back_populates="admin")

    def __repr__(self):
        return f"<Admin(id={self.id}, email={self.email})>"
