# Imports for convenience
from . import format

__all__ = [
    'format',
]
