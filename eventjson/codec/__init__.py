"""Codec base classes and helpers."""

from __future__ import annotations

import abc
from typing import IO, Any

from .. import errors, typeref, utils

REGISTRY: dict[str, type[Codec]] = {}


def create(name: str | Codec, **kwargs: Any) -> Codec:
    """Return a codec by name or pass through existing instances."""
    if isinstance(name, Codec):
        return name
    try:
        cls = REGISTRY[name]
    except KeyError:
        raise errors.RegistryError(f'unknown codec: {name}') from None
    return cls(**kwargs)


class Codec(abc.ABC):
    """Base class for codecs that convert between wire text and typed values.

    Subclasses implement `dumps` and `loads`; the public methods add the
    shared input and error policy.
    """

    NAME: str

    def __init_subclass__(cls) -> None:
        REGISTRY[cls.NAME] = cls

    @abc.abstractmethod
    def dumps(self, value: Any) -> str:
        """Serialize `value` into text."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def loads(self, data: str | bytes, target: Any) -> Any:
        """Deserialize `data` into an instance of the typing expression `target`."""
        raise NotImplementedError('abstract')

    def encode(self, value: Any) -> str:
        """Serialize `value`, raising `EncodingError` on failure."""
        try:
            return self.dumps(value)
        except Exception as exc:
            value_repr = utils.format.elide(repr(value))
            raise errors.EncodingError(
                f'Failed to encode as {self.NAME.upper()}: {exc}: value={value_repr}'
            ) from exc

    def decode(self, text: str | bytes | None, target: Any) -> Any:
        """Deserialize `text` into `target`, a class or `TypeRef`.

        Returns None when `text` is None, empty or only whitespace.
        """
        if text is None:
            return None
        text = text.strip()
        if not text:
            return None
        return self._decode(text, target)

    def decode_stream(self, stream: IO[Any], target: Any) -> Any:
        """Read `stream` to exhaustion and deserialize it into `target`.

        An empty stream is an error. The stream is left open.
        """
        try:
            data = stream.read()
        except Exception as exc:
            raise errors.DecodingError(f'Failed to decode: {exc}') from exc
        return self._decode(data, target)

    def _decode(self, data: str | bytes, target: Any) -> Any:
        """Wrapper that provides decoding error context. Used internally."""
        try:
            return self.loads(data, typeref.resolve(target))
        except Exception as exc:
            raise errors.DecodingError(
                f'Failed to decode: {exc}: data={utils.format.elide(repr(data))}'
            ) from exc

