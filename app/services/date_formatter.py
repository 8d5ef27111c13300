import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from babel.dates import format_datetime
from dateutil.parser import isoparse

from app.errors import FormatError
from app.settings import settings

DEFAULT_DATE_PATTERN = "dd MMM yyyy"
EDITED_DATE_PATTERN = "'* editado em' dd MMM yyyy', às' HH:mm"


def parse_timestamp(value: Optional[str]) -> datetime.datetime:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is given."""
    if not isinstance(value, str) or not value.strip():
        raise FormatError(f"Invalid timestamp: {value!r}")
    try:
        parsed = isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise FormatError(f"Invalid timestamp: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def format_date(
    value: Optional[str],
    pattern: str = DEFAULT_DATE_PATTERN,
    *,
    locale: Optional[str] = None,
    timezone: Optional[str] = None,
) -> str:
    """
    Render an ISO timestamp with a CLDR pattern in the blog's locale.
    Raises FormatError for anything that is not a timestamp.
    """
    parsed = parse_timestamp(value)
    tz = ZoneInfo(timezone or settings.DISPLAY_TIMEZONE)
    return format_datetime(
        parsed.astimezone(tz),
        pattern,
        locale=locale or settings.DATE_LOCALE,
    )
