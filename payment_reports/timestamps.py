from datetime import datetime, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

from .config import settings

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def as_utc(value: Union[datetime, str]) -> datetime:
    """Parse stored or requested times; naive values are UTC wall-clock times."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_display_time(
    value: Optional[Union[datetime, str]], zone: Optional[str] = None
) -> Optional[str]:
    if value is None:
        return None
    local = as_utc(value).astimezone(ZoneInfo(zone or settings.display_timezone))
    return local.strftime(DISPLAY_FORMAT)
