from __future__ import annotations


class EventJsonError(Exception):
    """Base class for all eventjson exceptions."""


class EncodingError(EventJsonError):
    """Raised when a value cannot be serialized."""


class DecodingError(EventJsonError):
    """Raised when input cannot be parsed into the requested type."""


class RegistryError(EventJsonError):
    """Raised when a codec name cannot be resolved."""
