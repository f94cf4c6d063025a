from datetime import datetime, timedelta, timezone
from typing import Optional

from claims_backend.state.claim_state import AppVersionDto

UNKNOWN_VERSION = "?.?"

# 100-nanosecond ticks counted from 0001-01-01T00:00:00Z
_TICKS_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)


def utc_ticks(moment: datetime) -> int:
    return (moment - _TICKS_EPOCH) // _MICROSECOND * 10


def get_app_version(app_version: Optional[str] = None) -> str:
    """Version plus local time, UTC time and UTC ticks, as compact JSON."""
    now = datetime.now().astimezone()
    dto = AppVersionDto(
        app_version=app_version or UNKNOWN_VERSION,
        app_now=now,
        app_now_utc=now.astimezone(timezone.utc),
        app_utc_ticks=utc_ticks(now),
    )
    return dto.model_dump_json(by_alias=True)
