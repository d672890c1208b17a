"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class StrbufError(Exception):
    """Base class for every error raised by strbuf itself.

    Example:
        >>> from strbuf.domain.errors import StrbufError
        >>> str(StrbufError("boom"))
        'boom'
    """


class InvalidEncodingError(StrbufError, LookupError):
    """Encoding name is empty, not a string, or unknown to the codec registry.

    Inherits from LookupError, the exception :func:`codecs.lookup` raises,
    so callers already handling unknown codecs keep working.

    Example:
        >>> from strbuf.domain.errors import InvalidEncodingError
        >>> err = InvalidEncodingError("Unknown encoding: 'klingon'")
        >>> isinstance(err, LookupError)
        True
    """


class BufferValueError(StrbufError, TypeError):
    """Value cannot be turned into buffer text.

    Raised for unsupported value types and for byte input that does not
    decode with the requested encoding.

    Example:
        >>> from strbuf.domain.errors import BufferValueError
        >>> err = BufferValueError("Unsupported value type: list")
        >>> isinstance(err, TypeError)
        True
    """


class ConfigurationError(StrbufError):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[strbuf]`` section holds values that fail validation.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from strbuf.domain.errors import ConfigurationError
        >>> str(ConfigurationError("default_encoding is not a known codec"))
        'default_encoding is not a known codec'
    """


__all__ = [
    "BufferValueError",
    "ConfigurationError",
    "InvalidEncodingError",
    "StrbufError",
]
