# photobooth/db/models/DeviceStorageItem.py
from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint
from photobooth.db.base import Base
from datetime import datetime

class DeviceStorageItem(Base):
    """String value persisted under a key for one booth device."""
    __tablename__ = 'device_storage'
    __table_args__ = (UniqueConstraint('device_id', 'key', name='uq_device_storage_device_key'),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(String(64), nullable=False, index=True)
    key = Column(String(64), nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<DeviceStorageItem(device_id={self.device_id}, key={self.key})>"
