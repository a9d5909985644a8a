"""UTC datetime utilities."""

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_iso_z(value: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision and a Z suffix.

    e.g. 2026-10-19T08:30:00.000Z, the shape of JavaScript Date#toISOString.
    """
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 string (Z suffix accepted) into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_epoch_ms(value: datetime) -> int:
    """Whole milliseconds since the epoch, floored, without float rounding."""
    return (value - _EPOCH) // _ONE_MS


def from_epoch_ms(value: int) -> datetime:
    return _EPOCH + value * _ONE_MS
