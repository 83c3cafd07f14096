"""Snapshot tag creation (timestamp plus short commit sha)."""

from datetime import datetime, timezone
from typing import Optional

from .config import SNAPSHOT_SHA_LENGTH, SNAPSHOT_TIME_FORMAT


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def create_snapshot(sha: str, now: Optional[datetime] = None) -> str:
    """
    Create a snapshot tag such as 20240131-154502-abc123.

    Args:
        sha: Commit sha
        now: Time of the build; naive datetimes are treated as UTC.
            Defaults to the current time.

    Returns:
        Snapshot tag string
    """
    if now is None:
        now = utc_now()
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    return f"{now.strftime(SNAPSHOT_TIME_FORMAT)}-{sha[:SNAPSHOT_SHA_LENGTH]}"
