from datetime import datetime, timezone, timedelta
from types import SimpleNamespace

from photobooth.utils.formatting import display_title, event_option_label, format_timestamp


def test_format_naive_timestamp_as_utc():
    assert format_timestamp(datetime(2025, 1, 6, 15, 4)) == "Mon, Jan 06, 2025, 03:04 PM UTC"


def test_format_in_display_timezone():
    value = datetime(2025, 1, 6, 15, 4, tzinfo=timezone.utc)
    assert format_timestamp(value, "America/New_York") == "Mon, Jan 06, 2025, 10:04 AM EST"


def test_format_aware_timestamp_is_converted():
    value = datetime(2025, 1, 7, 1, 30, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(value) == "Mon, Jan 06, 2025, 11:30 PM UTC"


def test_format_missing_timestamp():
    assert format_timestamp(None) == ""


def test_display_title():
    assert display_title("launch") == "LAUNCH"
    assert display_title(None) == ""


def test_event_option_label():
    event = SimpleNamespace(event_title="gala", event_date=datetime(2025, 3, 1, 19, 0))
    assert event_option_label(event) == "GALA / 2025-03-01T19:00:00"
