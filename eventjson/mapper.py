"""The process-wide JSON mapper shared by every caller."""

from __future__ import annotations

from threading import Lock
from typing import IO, Any

from . import logs
from .codec import Codec
from .codec.json import JsonCodec

log = logs.get(__name__)

_lock = Lock()
_mapper: Codec | None = None


def get() -> Codec:
    """Return the shared mapper, building it on first use."""
    global _mapper
    if _mapper is None:
        with _lock:
            if _mapper is None:
                _mapper = JsonCodec()
                log.debug('shared mapper: %s', _mapper.NAME)
    return _mapper


def encode(value: Any) -> str:
    """Encode `value` to JSON text using the shared mapper."""
    return get().encode(value)


def decode(text: str | bytes | None, target: Any) -> Any:
    """Decode JSON text into `target` using the shared mapper.

    Returns None for None, empty or whitespace-only text.
    """
    return get().decode(text, target)


def decode_stream(stream: IO[Any], target: Any) -> Any:
    """Decode a JSON stream into `target` using the shared mapper."""
    return get().decode_stream(stream, target)
