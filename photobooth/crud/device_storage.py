from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session
from photobooth.db.models.DeviceStorageItem import DeviceStorageItem

def get_item(db: Session, device_id: str, key: str) -> Optional[str]:
    item = db.query(DeviceStorageItem).filter(
        DeviceStorageItem.device_id == device_id,
        DeviceStorageItem.key == key
    ).first()
    return item.value if item else None

def set_item(db: Session, device_id: str, key: str, value: str, commit: bool = True):
    item = db.query(DeviceStorageItem).filter(
        DeviceStorageItem.device_id == device_id,
        DeviceStorageItem.key == key
    ).first()
    if item:
        item.value = value
        item.updated_at = datetime.utcnow()
    else:
        db.add(DeviceStorageItem(device_id=device_id, key=key, value=value))
    if commit:
        db.commit()

def remove_item(db: Session, device_id: str, *keys: str, commit: bool = True):
    db.query(DeviceStorageItem).filter(
        DeviceStorageItem.device_id == device_id,
        DeviceStorageItem.key.in_(keys)
    ).delete(synchronize_session=False)
    if commit:
        db.commit()
