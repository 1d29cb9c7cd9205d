"""Adapters exposing a codec through the event library's data contracts.

The event library only knows about `DataMarshaller` and `DataUnmarshaller`;
these factories bind a codec (the shared JSON mapper unless one is given) and,
for unmarshallers, a target type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from . import mapper
from .codec import Codec

P_co = TypeVar('P_co', covariant=True)
P_contra = TypeVar('P_contra', contravariant=True)
T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)
A_contra = TypeVar('A_contra', contravariant=True)


class Attributes(Protocol):
    """Event attribute set. Opaque to the codecs."""


class DataUnmarshaller(Protocol[P_contra, A_contra, T_co]):
    def __call__(self, payload: P_contra, attributes: A_contra) -> T_co: ...


class DataMarshaller(Protocol[T_contra, P_co]):
    def __call__(self, data: T_contra, headers: Mapping[str, Any]) -> P_co: ...


def unmarshaller(
    target: Any, codec: Codec | None = None
) -> DataUnmarshaller[str, Attributes, Any]:
    """Return an unmarshaller decoding payloads into `target`.

    The attributes are not consulted.
    """

    def unmarshal(payload: str, attributes: Attributes) -> Any:
        return (codec or mapper.get()).decode(payload, target)

    return unmarshal


def marshaller(codec: Codec | None = None) -> DataMarshaller[Any, str]:
    """Return a marshaller encoding data to text. The headers are not consulted."""

    def marshal(data: Any, headers: Mapping[str, Any]) -> str:
        return (codec or mapper.get()).encode(data)

    return marshal
