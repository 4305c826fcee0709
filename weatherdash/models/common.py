"""Common helpers shared across models."""

from datetime import UTC, datetime


def from_epoch(ts: int) -> datetime:
    """Aware UTC datetime for an epoch-seconds timestamp."""
    return datetime.fromtimestamp(ts, UTC)
