"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.buffer` - The StringBuffer value object
    * :mod:`.helpers` - Helper namespace and the ``str`` helper factory
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .buffer import DEFAULT_ENCODING, BufferValue, StringBuffer, validate_encoding
from .enums import OutputFormat
from .errors import BufferValueError, ConfigurationError, InvalidEncodingError, StrbufError
from .helpers import STR_HELPER_NAME, HelperNamespace, build_str_helper

__all__ = [
    # Buffer
    "BufferValue",
    "DEFAULT_ENCODING",
    "StringBuffer",
    "validate_encoding",
    # Helpers
    "HelperNamespace",
    "STR_HELPER_NAME",
    "build_str_helper",
    # Enums
    "OutputFormat",
    # Errors
    "BufferValueError",
    "ConfigurationError",
    "InvalidEncodingError",
    "StrbufError",
]
