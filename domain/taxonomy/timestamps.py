"""Comparable forms of item field values."""

from datetime import date, datetime, time
from typing import Any


def as_comparable(value: Any) -> Any:
    """
    Map a field value onto something that orders against its siblings.

    Manifests mix ``2024-01-05`` (a date) with ``2024-01-05 10:00`` (a
    datetime); a bare date is taken as midnight of that day. Other values
    pass through unchanged.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value
