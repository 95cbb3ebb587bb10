from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time, timezone-aware and with microsecond precision"""
    return datetime.now(timezone.utc)
