from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session
from photobooth.db.models.Event import Event
from fastapi import HTTPException

def list_events_by_admin(db: Session, admin_id: int) -> List[Event]:
    return db.query(Event).filter(Event.admin_id == admin_id).order_by(Event.event_date).all()

def get_event(db: Session, event_id: int) -> Optional[Event]:
    return db.query(Event).filter(Event.id == event_id).first()

def create_event(db: Session, admin_id: int, event_title: str, event_date: datetime) -> Event:
    new_event = Event(
        event_title=event_title,
        event_date=event_date,
        admin_id=admin_id,
    )
    db.add(new_event)
    db.commit()
    db.refresh(new_event)
    return new_event

def delete_event(db: Session, event_id: int, admin_id: int):
    """Delete an event and its photos. Only the owning admin may do this."""
    event = get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    if event.admin_id != admin_id:
        raise HTTPException(status_code=403, detail="Event doesn't belong to the current admin")

    db.delete(event)
    db.commit()
