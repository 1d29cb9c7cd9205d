"""JSON codec backed by msgspec."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

import msgspec
from msgspec import json

from .. import timestamps
from . import Codec

Order = Literal['deterministic', 'sorted'] | None


class JsonCodec(Codec):
    """Codec that serializes event attributes and data using JSON.

    Timestamps are written with `timestamps.format_timestamp` and must carry
    an offset when read back.
    """

    NAME = 'json'

    def __init__(self, order: Order = None, strict: bool = True) -> None:
        self.order = order
        self.strict = strict
        self._encoder = json.Encoder(order=order)
        self._decoders: dict[Any, json.Decoder[Any]] = {}

    def dumps(self, value: Any) -> str:
        """Encode Python objects to JSON text."""
        tree = msgspec.to_builtins(value, builtin_types=(datetime,), order=self.order)
        return self._encoder.encode(timestamps.render(tree)).decode()

    def loads(self, data: str | bytes, target: Any) -> Any:
        """Decode JSON into an instance of `target`."""
        value = self._decoder(target).decode(data)
        timestamps.require_offsets(msgspec.to_builtins(value, builtin_types=(datetime,)))
        return value

    def _decoder(self, target: Any) -> json.Decoder[Any]:
        decoder = self._decoders.get(target)
        if decoder is None:
            decoder = json.Decoder(target, strict=self.strict)
            decoder = self._decoders.setdefault(target, decoder)
        return decoder
