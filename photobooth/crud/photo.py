from typing import List, Optional

from sqlalchemy.orm import Session
from photobooth.db.models.Event import Event
from photobooth.db.models.Photo import Photo
from photobooth.schemas.photo import Photo as PhotoSchema
from fastapi import HTTPException

def list_photos_by_event(db: Session, event_id: int) -> List[Photo]:
    return db.query(Photo).filter(Photo.event_id == event_id).order_by(Photo.id).all()

def get_photo_by_blob_id(db: Session, blob_id: str) -> Optional[Photo]:
    return db.query(Photo).filter(Photo.blob_id == blob_id).first()

def create_photo(db: Session, blob_id: str, object_id: str, event_id: int, user: Optional[str] = None) -> Photo:
    new_photo = Photo(
        blob_id=blob_id,
        object_id=object_id,
        event_id=event_id,
        user=user,
    )
    db.add(new_photo)
    db.commit()
    db.refresh(new_photo)
    return new_photo

def delete_photo(db: Session, blob_id: str, admin_id: Optional[int]) -> PhotoSchema:
    """
    Delete a photo by blob id.

    The caller must be the admin owning the photo's event; anyone else gets
    a 403 HTTPException and the row is left in place.
    """
    photo = get_photo_by_blob_id(db, blob_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")

    owner_id = db.query(Event.admin_id).filter(Event.id == photo.event_id).scalar()
    if admin_id is None or owner_id != admin_id:
        raise HTTPException(status_code=403, detail="Only the event's admin can delete its photos")

    deleted = PhotoSchema.model_validate(photo)
    db.delete(photo)
    db.commit()
    return deleted
