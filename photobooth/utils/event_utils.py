from typing import List, Optional

from photobooth.db.models.Event import Event
from photobooth.db.models.Photo import Photo
from photobooth.schemas.event import Event as EventSchema, EventHeader, EventOption
from photobooth.schemas.photo import GalleryPhoto
from photobooth.services.walrus import blob_url, explorer_url
from photobooth.utils.formatting import display_title, event_option_label, format_timestamp

def format_event_data(events: List[Event]):
    return [
        {
            **EventSchema.model_validate(event).model_dump(mode="json"),
            "display_title": display_title(event.event_title),
            "display_date": format_timestamp(event.event_date),
        }
        for event in events
    ]

def format_event_options(events: List[Event]) -> List[EventOption]:
    return [EventOption(id=event.id, label=event_option_label(event)) for event in events]

def format_event_header(event: Optional[Event]) -> Optional[EventHeader]:
    if event is None:
        return None
    record = EventSchema.model_validate(event)
    return EventHeader(
        id=record.id,
        title=display_title(record.event_title),
        event_date=format_timestamp(record.event_date),
        created_at=format_timestamp(record.created_at),
        admin_id=record.admin_id,
    )

def format_gallery_photos(photos: List[Photo]) -> List[GalleryPhoto]:
    return [
        GalleryPhoto(
            blob_id=photo.blob_id,
            object_id=photo.object_id,
            event_id=photo.event_id,
            image_url=blob_url(photo.blob_id),
            explorer_url=explorer_url(photo.object_id),
            event_label=str(photo.event_id) if photo.event_id else "No event specified",
        )
        for photo in photos
    ]
