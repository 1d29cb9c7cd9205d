"""JSON codec for event attributes and data."""

from . import errors, logs, timestamps
from .codec import Codec, create
from .codec.json import JsonCodec
from .errors import DecodingError, EncodingError
from .mapper import decode, decode_stream, encode
from .adapters import DataMarshaller, DataUnmarshaller, marshaller, unmarshaller
from .typeref import TypeRef

__all__ = [
    'Codec',
    'DataMarshaller',
    'DataUnmarshaller',
    'DecodingError',
    'EncodingError',
    'JsonCodec',
    'TypeRef',
    'create',
    'decode',
    'decode_stream',
    'encode',
    'errors',
    'logs',
    'marshaller',
    'timestamps',
    'unmarshaller',
]
