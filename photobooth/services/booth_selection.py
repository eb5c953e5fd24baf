"""
Booth selection persisted per device.

The selected event and the camera flag are stored together as one versioned
record under ``boothSelection``. Earlier clients wrote them as two separate
keys (``selectedEvent`` and ``camActivated``); that layout is still read, but
only when both keys are present and parse, so a half-written pair loads as no
selection.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from photobooth.crud.device_storage import get_item, set_item, remove_item
from photobooth.schemas.booth import BoothSelection, BoothState
from photobooth.schemas.event import Event

logger = logging.getLogger(__name__)

SELECTION_KEY = "boothSelection"
LEGACY_EVENT_KEY = "selectedEvent"
LEGACY_CAM_KEY = "camActivated"


def parse_selection(raw: Optional[str]) -> Optional[BoothSelection]:
    if raw is None:
        return None
    try:
        return BoothSelection.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Discarding malformed booth selection: {e.error_count()} errors")
        return None


def parse_legacy_selection(event_raw: Optional[str], cam_raw: Optional[str]) -> Optional[BoothSelection]:
    if event_raw is None or cam_raw is None:
        return None
    try:
        cam_activated = json.loads(cam_raw)
        event = Event.model_validate_json(event_raw)
    except (ValueError, ValidationError):
        logger.warning("Discarding malformed legacy booth selection")
        return None
    if cam_activated is not True:
        return None
    return BoothSelection(event=event, cam_activated=True)


def load_selection(db: Session, device_id: Optional[str]) -> Optional[BoothSelection]:
    """Active selection for the device, or None when the booth is unselected."""
    if not device_id:
        return None

    selection = parse_selection(get_item(db, device_id, SELECTION_KEY))
    if selection is None:
        selection = parse_legacy_selection(
            get_item(db, device_id, LEGACY_EVENT_KEY),
            get_item(db, device_id, LEGACY_CAM_KEY),
        )
    if selection is None or not selection.cam_activated:
        return None
    return selection


def selection_state(selection: Optional[BoothSelection]) -> BoothState:
    return BoothState.SELECTED_ACTIVE if selection else BoothState.UNSELECTED


def save_selection(db: Session, device_id: str, event: Event) -> BoothSelection:
    selection = BoothSelection(event=event, cam_activated=True)
    set_item(db, device_id, SELECTION_KEY, selection.model_dump_json(), commit=False)
    remove_item(db, device_id, LEGACY_EVENT_KEY, LEGACY_CAM_KEY, commit=False)
    db.commit()
    logger.info(f"Device {device_id} activated booth for event {event.id}")
    return selection


def clear_selection(db: Session, device_id: str):
    remove_item(db, device_id, SELECTION_KEY, LEGACY_EVENT_KEY, LEGACY_CAM_KEY)
    logger.info(f"Device {device_id} deactivated booth")
