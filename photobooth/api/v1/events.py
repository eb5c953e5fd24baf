import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from photobooth.crud.admin import get_admin_id
from photobooth.crud.event import list_events_by_admin, get_event, create_event, delete_event
from photobooth.db.session import get_db
from photobooth.schemas.event import EventCreate
from photobooth.schemas.user import Identity, Response
from photobooth.security.auth import require_connected, require_admin_id
from photobooth.utils.event_utils import format_event_data, format_event_header

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/events", response_model=Response)
def get_events(
    identity: Identity = Depends(require_connected),
    db: Session = Depends(get_db)
):
    try:
        admin_id = get_admin_id(db, identity.email)
        events = list_events_by_admin(db, admin_id) if admin_id is not None else []
        events_data = format_event_data(events)
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Error fetching current admin's events: {e}")
        return Response(
            message="Error loading events",
            status="error",
            status_code=500
        )

    return Response(
        message="Events retrieved successfully",
        data={
            "admin_id": admin_id,
            "total_events": len(events_data),
            "events": events_data
        },
        status="success",
        status_code=200
    )

@router.post("/events", response_model=Response)
def add_event(
    event_in: EventCreate,
    admin_id: int = Depends(require_admin_id),
    db: Session = Depends(get_db)
):
    if not event_in.event_title.strip():
        return Response(
            message="Event title must not be empty",
            status="error",
            status_code=400
        )

    try:
        new_event = create_event(db, admin_id, event_in.event_title.strip(), event_in.event_date)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating event: {e}")
        return Response(
            message="Error creating event",
            status="error",
            status_code=500
        )

    logger.info(f"Admin {admin_id} created event {new_event.id}")
    return Response(
        message="Event created successfully",
        data={"event": format_event_data([new_event])[0]},
        status="success",
        status_code=201
    )

@router.get("/events/{event_id}", response_model=Response)
def get_event_details(
    event_id: int,
    db: Session = Depends(get_db)
):
    try:
        event = get_event(db, event_id)
        header = format_event_header(event)
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Error fetching event {event_id}: {e}")
        return Response(
            message="Error loading event",
            status="error",
            status_code=500
        )

    if header is None:
        return Response(
            message="Event not found",
            status="error",
            status_code=404
        )

    return Response(
        message="Event retrieved successfully",
        data={"event": jsonable_encoder(header)},
        status="success",
        status_code=200
    )

@router.delete("/events/{event_id}", response_model=Response)
def remove_event(
    event_id: int,
    admin_id: int = Depends(require_admin_id),
    db: Session = Depends(get_db)
):
    try:
        delete_event(db, event_id, admin_id)
        events_data = format_event_data(list_events_by_admin(db, admin_id))
    except (SQLAlchemyError, ValidationError) as e:
        db.rollback()
        logger.error(f"Error deleting event: {e}")
        return Response(
            message="Error deleting event",
            status="error",
            status_code=500
        )

    logger.info(f"Admin {admin_id} deleted event {event_id}")
    return Response(
        message="Event deleted successfully",
        data={
            "total_events": len(events_data),
            "events": events_data
        },
        status="success",
        status_code=200
    )
