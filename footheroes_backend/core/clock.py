from datetime import datetime

import pytz


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the form SQLite stores)."""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """
    Normalizes an incoming datetime to naive UTC.
    Aware values (e.g. '2030-05-01T18:00:00+02:00') are converted first,
    naive values are assumed to already be UTC.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(pytz.utc).replace(tzinfo=None)
