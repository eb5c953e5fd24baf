from enum import Enum
from typing import Literal, List, Optional

from pydantic import BaseModel

from photobooth.schemas.event import Event, EventOption

SELECTION_VERSION = 1


class BoothSelection(BaseModel):
    """Selected event and camera flag, persisted for a device as one record."""
    version: Literal[1] = SELECTION_VERSION
    event: Event
    cam_activated: bool = True


class BoothState(str, Enum):
    UNSELECTED = "unselected"
    SELECTED_ACTIVE = "selected_active"


class BoothViewKind(str, Enum):
    CONNECT = "connect"
    SELECT = "select"
    BOOTH = "booth"


class SelectEventInput(BaseModel):
    event_id: int


class BoothView(BaseModel):
    view: BoothViewKind
    state: BoothState
    connected: bool
    event_id: Optional[int] = None
    event_title: Optional[str] = None
    can_deactivate: bool = False
    show_events_link: bool = False
    events: List[EventOption] = []
