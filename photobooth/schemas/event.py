from pydantic import BaseModel
from datetime import datetime

class Event(BaseModel):
    id: int
    created_at: datetime
    event_title: str
    event_date: datetime
    admin_id: int

    class Config:
        from_attributes = True

class EventCreate(BaseModel):
    event_title: str
    event_date: datetime

class EventOption(BaseModel):
    id: int
    label: str

class EventHeader(BaseModel):
    id: int
    title: str
    event_date: str
    created_at: str
    admin_id: int
