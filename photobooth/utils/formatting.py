from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from photobooth.config.settings import settings

# Mon, Jan 06, 2025, 03:04 PM UTC
DISPLAY_FORMAT = "%a, %b %d, %Y, %I:%M %p %Z"


def format_timestamp(value: Optional[datetime], tz_name: Optional[str] = None) -> str:
    if value is None:
        return ""
    if value.tzinfo is None:
        # stored timestamps are naive UTC
        value = value.replace(tzinfo=timezone.utc)
    tz = ZoneInfo(tz_name or settings.DISPLAY_TIMEZONE)
    return value.astimezone(tz).strftime(DISPLAY_FORMAT)


def display_title(title: Optional[str]) -> str:
    return (title or "").upper()


def event_option_label(event) -> str:
    return f"{display_title(event.event_title)} / {event.event_date.isoformat()}"
