"""UTC datetime utilities."""

from datetime import datetime, timezone


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp into a timezone-aware UTC datetime.

    Accepts a trailing 'Z'. Naive values are taken to be UTC.
    Raises ValueError on unparseable input, and when the UTC instant falls
    outside the datetime range (e.g. 0001-01-01T00:00:00+01:00).
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"timestamp out of range in UTC: {value!r}") from exc
