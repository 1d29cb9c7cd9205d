"""Helpers for configuring and using project logging."""

from __future__ import annotations

from logging import DEBUG, INFO, Formatter, StreamHandler, getLogger

get = getLogger
log = get(__name__)

FORMAT = '%(levelname).1s %(asctime)s . %(message)s'


def init(debug_level: int = 0) -> None:
    """Initializes simple logging defaults."""
    root_log = get()

    if root_log.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter(FORMAT))

    root_log.addHandler(handler)
    root_log.setLevel(DEBUG if debug_level > 0 else INFO)

    mapper_log = get('eventjson.mapper')
    mapper_log.setLevel(DEBUG if debug_level > 1 else INFO)
