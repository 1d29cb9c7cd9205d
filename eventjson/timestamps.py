"""Timestamp rule applied by the JSON mapper.

Timestamps travel as ISO-8601 strings that always carry the offset they were
created with, e.g. ``2018-04-26T14:48:09.769-04:00``. Decoding keeps that exact
offset instead of normalizing to UTC or local time.

Parsing is left to msgspec's RFC 3339 decoder, which rounds fractions to
microseconds; `require_offsets` then rejects values that came without one.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any


def format_timestamp(value: datetime) -> str:
    """Render *value* as an ISO-8601 string including its offset."""
    offset = value.utcoffset()
    if offset is None:
        raise ValueError(f'timestamp has no offset: {value!r}')

    text = (
        f'{value.year:04d}-{value.month:02d}-{value.day:02d}'
        f'T{value.hour:02d}:{value.minute:02d}:{value.second:02d}'
    )
    if value.microsecond:
        text += f'.{value.microsecond:06d}'.rstrip('0')
    return text + format_offset(offset)


def format_offset(offset: timedelta) -> str:
    """Render *offset* as `Z` or `±HH:MM`.

    RFC 3339 has no form for offsets with seconds (e.g. local mean time zones),
    so those raise `ValueError`.
    """
    if offset % timedelta(minutes=1):
        raise ValueError(f'offset is not a whole number of minutes: {offset}')
    minutes = int(offset.total_seconds()) // 60
    if not minutes:
        return 'Z'
    sign = '-' if minutes < 0 else '+'
    hours, minutes = divmod(abs(minutes), 60)
    return f'{sign}{hours:02d}:{minutes:02d}'


def render(obj: Any) -> Any:
    """Replace every timestamp inside a builtin tree by its string form."""
    if isinstance(obj, datetime):
        return format_timestamp(obj)
    if isinstance(obj, Mapping):
        return {render(k): render(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [render(item) for item in obj]
    return obj


def require_offsets(obj: Any) -> None:
    """Raise `ValueError` if any timestamp inside *obj* lacks an offset."""
    if isinstance(obj, datetime):
        if obj.tzinfo is None:
            raise ValueError(f'timestamp has no offset: {obj.isoformat()}')
    elif isinstance(obj, Mapping):
        for key, value in obj.items():
            require_offsets(key)
            require_offsets(value)
    elif isinstance(obj, (list, tuple)):
        for item in obj:
            require_offsets(item)
