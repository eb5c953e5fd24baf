import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from photobooth.crud.admin import get_admin_id
from photobooth.crud.event import get_event
from photobooth.crud.photo import list_photos_by_event, delete_photo
from photobooth.db.session import get_db
from photobooth.schemas.user import Identity, Response
from photobooth.security.auth import get_identity, require_connected
from photobooth.utils.event_utils import format_event_header, format_gallery_photos

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/events/{event_id}/photos", response_model=Response)
def get_event_photos(
    event_id: int,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db)
):
    try:
        photos = list_photos_by_event(db, event_id)
        event = get_event(db, event_id)
        header = format_event_header(event)
        admin_id = get_admin_id(db, identity.email) if identity.connected else None
        photos_data = format_gallery_photos(photos)
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Error fetching photos: {e}")
        return Response(
            message="Error loading photos",
            status="error",
            status_code=500
        )

    is_owner = header is not None and admin_id is not None and header.admin_id == admin_id

    return Response(
        message="Photos retrieved successfully" if photos_data else "No photos found for this event.",
        data={
            "event": jsonable_encoder(header),
            "is_owner": is_owner,
            "can_delete": identity.connected and is_owner,
            "total_photos": len(photos_data),
            "photos": jsonable_encoder(photos_data)
        },
        status="success",
        status_code=200
    )

@router.delete("/photos/{blob_id}", response_model=Response)
def remove_photo(
    blob_id: str,
    identity: Identity = Depends(require_connected),
    db: Session = Depends(get_db)
):
    try:
        admin_id = get_admin_id(db, identity.email)
        photo = delete_photo(db, blob_id, admin_id)
        remaining = format_gallery_photos(list_photos_by_event(db, photo.event_id))
    except (SQLAlchemyError, ValidationError) as e:
        db.rollback()
        logger.error(f"Error deleting photo {blob_id}: {e}")
        return Response(
            message="Error deleting photo",
            status="error",
            status_code=500
        )

    logger.info(f"Admin {admin_id} deleted photo {blob_id} from event {photo.event_id}")
    return Response(
        message="Photo deleted successfully",
        data={
            "blob_id": blob_id,
            "event_id": photo.event_id,
            "total_photos": len(remaining),
            "photos": jsonable_encoder(remaining)
        },
        status="success",
        status_code=200
    )
