"""Helpers for timestamp parsing and local day bounds."""

from datetime import date, datetime, time, timedelta


def parse_timestamp(value) -> datetime | None:
    """Parse a raw timestamp into a local naive datetime.

    Args:
        value: ``datetime``, ``date`` or ISO-8601 string. Aware values are
            converted to the local timezone before dropping tzinfo.

    Returns:
        datetime | None: Local naive datetime, or None when the value is
        missing or malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the inclusive [start, end] bounds of a local calendar day.

    The end bound is 23:59:59.999, matching millisecond-precision clients.
    """
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1) - timedelta(milliseconds=1)
    return start, end


__all__ = ["parse_timestamp", "day_bounds"]
