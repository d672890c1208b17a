"""String buffer value object built by the ``str`` helper.

The buffer holds decoded text together with the name of the encoding it was
created with. It is deliberately small: it validates its inputs on
construction and exposes read-only accessors. Constructor failures are the
only error surface the ``str`` helper passes through to its callers.
"""

from __future__ import annotations

import codecs
from typing import Union

from .errors import BufferValueError, InvalidEncodingError

DEFAULT_ENCODING = "UTF-8"

BufferValue = Union[str, bytes, bytearray, int, float, None, "StringBuffer"]
"""Value kinds accepted by :class:`StringBuffer`."""


def validate_encoding(encoding: object) -> str:
    """Return ``encoding`` unchanged when Python's codec registry knows it.

    Args:
        encoding: Candidate encoding name.

    Returns:
        The encoding name exactly as given.

    Raises:
        InvalidEncodingError: If the name is not a non-empty string or is not
            a registered codec.

    Examples:
        >>> validate_encoding("ISO-8859-1")
        'ISO-8859-1'
        >>> validate_encoding("klingon")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidEncodingError: Unknown encoding: 'klingon'
    """
    if not isinstance(encoding, str) or not encoding.strip():
        raise InvalidEncodingError(f"Encoding must be a non-empty string, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise InvalidEncodingError(f"Unknown encoding: {encoding!r}") from exc
    return encoding


def _coerce_text(value: object, encoding: str) -> str:
    """Turn a supported value into buffer text."""
    if isinstance(value, StringBuffer):
        return value.value
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode(encoding)
        except UnicodeDecodeError as exc:
            raise BufferValueError(f"Value is not valid {encoding}: {exc.reason}") from exc
        except LookupError as exc:
            raise InvalidEncodingError(f"{encoding!r} is not a text encoding") from exc
    # bool is an int subclass; reject it before the numeric branch
    if isinstance(value, bool):
        raise BufferValueError("Unsupported value type: bool")
    if isinstance(value, (int, float)):
        return str(value)
    raise BufferValueError(f"Unsupported value type: {type(value).__name__}")


class StringBuffer:
    """Text paired with the encoding it was created under.

    Args:
        value: Content to wrap. See :data:`BufferValue` for accepted kinds.
        encoding: Codec name, stored exactly as given.

    Raises:
        InvalidEncodingError: If ``encoding`` is unknown.
        BufferValueError: If ``value`` has an unsupported type or its bytes do
            not decode with ``encoding``.

    Example:
        >>> buf = StringBuffer("hello")
        >>> buf
        StringBuffer('hello', encoding='UTF-8')
        >>> str(buf), len(buf)
        ('hello', 5)
        >>> StringBuffer(b"caf\\xe9", "ISO-8859-1").value
        'café'
    """

    __slots__ = ("_value", "_encoding")

    def __init__(self, value: BufferValue, encoding: str = DEFAULT_ENCODING) -> None:
        self._encoding = validate_encoding(encoding)
        self._value = _coerce_text(value, self._encoding)

    @property
    def value(self) -> str:
        return self._value

    @property
    def encoding(self) -> str:
        return self._encoding

    def as_dict(self) -> dict[str, object]:
        """Return a plain mapping suitable for JSON output.

        Example:
            >>> StringBuffer("abc", "ascii").as_dict()
            {'value': 'abc', 'encoding': 'ascii', 'length': 3}
        """
        return {"value": self._value, "encoding": self._encoding, "length": len(self._value)}

    def __str__(self) -> str:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f"StringBuffer({self._value!r}, encoding={self._encoding!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringBuffer):
            return self._value == other._value and self._encoding == other._encoding
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._value, self._encoding))


__all__ = [
    "BufferValue",
    "DEFAULT_ENCODING",
    "StringBuffer",
    "validate_encoding",
]
