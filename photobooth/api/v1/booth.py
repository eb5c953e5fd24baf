import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Header, Request, UploadFile, File, Form
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from photobooth.config.settings import settings
from photobooth.core.limiter import limiter
from photobooth.crud.admin import get_admin_id
from photobooth.crud.event import list_events_by_admin, get_event
from photobooth.crud.photo import create_photo
from photobooth.db.session import get_db
from photobooth.schemas.booth import BoothView, BoothViewKind, SelectEventInput
from photobooth.schemas.event import Event as EventSchema
from photobooth.schemas.photo import Photo as PhotoSchema
from photobooth.schemas.user import Identity, Response
from photobooth.security.auth import get_identity, require_connected, require_admin_id
from photobooth.services.booth_selection import load_selection, save_selection, clear_selection, selection_state
from photobooth.services.image_services import normalize_capture, InvalidImageError
from photobooth.services.walrus import store_blob, blob_url, explorer_url, BlobStorageError
from photobooth.utils.event_utils import format_event_options
from photobooth.utils.formatting import display_title

router = APIRouter()
logger = logging.getLogger(__name__)


def resolve_booth_view(db: Session, identity: Identity, device_id: Optional[str]) -> BoothView:
    selection = load_selection(db, device_id)
    state = selection_state(selection)

    if not identity.connected and selection is None:
        return BoothView(view=BoothViewKind.CONNECT, state=state, connected=False)

    if selection is not None:
        return BoothView(
            view=BoothViewKind.BOOTH,
            state=state,
            connected=identity.connected,
            event_id=selection.event.id,
            event_title=display_title(selection.event.event_title),
            can_deactivate=identity.connected,
        )

    admin_id = get_admin_id(db, identity.email)
    events = list_events_by_admin(db, admin_id) if admin_id is not None else []
    return BoothView(
        view=BoothViewKind.SELECT,
        state=state,
        connected=True,
        show_events_link=True,
        events=format_event_options(events),
    )

def require_device_id(x_device_id: Optional[str] = Header(None)) -> str:
    if not x_device_id or not x_device_id.strip():
        raise HTTPException(status_code=400, detail="Missing X-Device-Id header")
    return x_device_id.strip()

def booth_error(message: str, e: Exception) -> Response:
    logger.error(f"{message}: {e}")
    return Response(
        message="Error loading events",
        status="error",
        status_code=500
    )


@router.get("/photo-booth", response_model=Response)
def get_photo_booth(
    x_device_id: Optional[str] = Header(None),
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db)
):
    try:
        view = resolve_booth_view(db, identity, x_device_id)
    except (SQLAlchemyError, ValidationError) as e:
        return booth_error("Error resolving photo booth", e)

    return Response(
        message="Photo booth retrieved successfully",
        data=jsonable_encoder(view),
        status="success",
        status_code=200
    )

@router.post("/photo-booth/select", response_model=Response)
def select_event(
    selection_in: SelectEventInput,
    device_id: str = Depends(require_device_id),
    identity: Identity = Depends(require_connected),
    admin_id: int = Depends(require_admin_id),
    db: Session = Depends(get_db)
):
    try:
        events = list_events_by_admin(db, admin_id)
        found = next((event for event in events if event.id == selection_in.event_id), None)
        if found is None:
            raise HTTPException(status_code=404, detail="Event not found among the current admin's events")

        save_selection(db, device_id, EventSchema.model_validate(found))
        view = resolve_booth_view(db, identity, device_id)
    except (SQLAlchemyError, ValidationError) as e:
        db.rollback()
        return booth_error("Error selecting event", e)

    return Response(
        message="Photo booth activated",
        data=jsonable_encoder(view),
        status="success",
        status_code=200
    )

@router.post("/photo-booth/deactivate", response_model=Response)
def deactivate_booth(
    device_id: str = Depends(require_device_id),
    identity: Identity = Depends(require_connected),
    db: Session = Depends(get_db)
):
    try:
        clear_selection(db, device_id)
        view = resolve_booth_view(db, identity, device_id)
    except (SQLAlchemyError, ValidationError) as e:
        db.rollback()
        return booth_error("Error deactivating photo booth", e)

    return Response(
        message="Photo booth deactivated",
        data=jsonable_encoder(view),
        status="success",
        status_code=200
    )

@router.post("/photo-booth/photos", response_model=Response)
@limiter.limit(settings.UPLOAD_RATE_LIMIT)
def capture_photo(
    request: Request,
    file: UploadFile = File(...),
    user: Optional[str] = Form(None),
    device_id: str = Depends(require_device_id),
    db: Session = Depends(get_db)
):
    selection = load_selection(db, device_id)
    if selection is None:
        raise HTTPException(status_code=409, detail="Photo booth is not active on this device")

    event = get_event(db, selection.event.id)
    if event is None:
        raise HTTPException(status_code=404, detail="Selected event no longer exists")

    contents = file.file.read(settings.UPLOAD_MAX_BYTES + 1)
    if len(contents) > settings.UPLOAD_MAX_BYTES:
        raise HTTPException(status_code=413, detail=f"Photo exceeds {settings.UPLOAD_MAX_BYTES} bytes")

    try:
        jpeg = normalize_capture(contents)
    except InvalidImageError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        blob_id, object_id = store_blob(jpeg, "image/jpeg")
    except BlobStorageError as e:
        logger.error(f"Error uploading photo for event {event.id}: {e}")
        return Response(
            message="Error uploading photo",
            status="error",
            status_code=502
        )

    try:
        photo = create_photo(db, blob_id, object_id, event.id, user or None)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving photo {blob_id}: {e}")
        return Response(
            message="Error saving photo",
            status="error",
            status_code=500
        )

    logger.info(f"Captured photo {blob_id} for event {event.id}")
    return Response(
        message="Photo captured successfully",
        data={
            "photo": jsonable_encoder(PhotoSchema.model_validate(photo)),
            "image_url": blob_url(blob_id),
            "explorer_url": explorer_url(object_id),
        },
        status="success",
        status_code=201
    )
