from typing import Optional

from pydantic import BaseModel
from datetime import datetime

class Photo(BaseModel):
    id: int
    created_at: datetime
    blob_id: str
    object_id: str
    event_id: int
    user: Optional[str] = None

    class Config:
        from_attributes = True

class GalleryPhoto(BaseModel):
    blob_id: str
    object_id: str
    event_id: int
    image_url: str
    explorer_url: str
    event_label: str
