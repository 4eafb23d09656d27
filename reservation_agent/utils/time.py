from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Converts a datetime to timezone-aware UTC; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def api_iso_z(dt: datetime) -> str:
    """Formats a datetime into an ISO 8601 string ending in 'Z' for API payloads."""
    return to_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current instant formatted like '2024-03-15T19:00:00.000Z'."""
    return api_iso_z(utc_now())
