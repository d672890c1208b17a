"""Helper namespace and the ``str`` helper factory.

A :class:`HelperNamespace` is a small registry of named callables with
attribute access, so ``helpers.str("hello")`` reads like a global function
while staying out of Python's builtins. Registration never overwrites: the
first callable registered under a name keeps it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Protocol

from .buffer import DEFAULT_ENCODING, BufferValue, StringBuffer

STR_HELPER_NAME = "str"


class _BufferFactory(Protocol):
    def __call__(self, value: BufferValue, encoding: str) -> StringBuffer: ...


class HelperNamespace:
    """Registry of helper callables reachable by name or attribute.

    Example:
        >>> ns = HelperNamespace()
        >>> ns.register("shout", lambda text: text.upper())
        True
        >>> ns.register("shout", lambda text: text)
        False
        >>> ns.shout("hi")
        'HI'
        >>> "shout" in ns, len(ns)
        (True, 1)
    """

    def __init__(self) -> None:
        self._registry: dict[str, Callable[..., Any]] = {}

    def register(self, name: str, func: Callable[..., Any]) -> bool:
        """Add ``func`` under ``name`` unless the name is already taken.

        Returns:
            True when the callable was added, False when an existing helper
            kept the name.

        Raises:
            ValueError: If ``name`` is not an identifier. Names starting
                with ``_`` and names of namespace methods such as ``names``
                are reserved.
            TypeError: If ``func`` is not callable.
        """
        if not name or not name.isidentifier():
            raise ValueError(f"Helper name must be a Python identifier, got {name!r}")
        if name.startswith("_") or hasattr(type(self), name):
            raise ValueError(f"Helper name {name!r} is reserved by HelperNamespace")
        if not callable(func):
            raise TypeError(f"Helper {name!r} must be callable, got {type(func).__name__}")
        if name in self._registry:
            return False
        self._registry[name] = func
        return True

    def get(self, name: str, default: Callable[..., Any] | None = None) -> Callable[..., Any] | None:
        return self._registry.get(name, default)

    def names(self) -> list[str]:
        return sorted(self._registry)

    def clear(self) -> None:
        self._registry.clear()

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # only reached for names that are not real attributes
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._registry[name]
        except KeyError:
            raise AttributeError(f"No helper named {name!r} is registered") from None

    def __getitem__(self, name: str) -> Callable[..., Any]:
        return self._registry[name]

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"HelperNamespace({self.names()!r})"


def build_str_helper(buffer_factory: _BufferFactory) -> Callable[..., StringBuffer]:
    """Return the ``str`` helper bound to ``buffer_factory``.

    The helper forwards its two arguments to the factory exactly as received
    and returns whatever the factory builds. Factory errors propagate as-is.

    Example:
        >>> helper = build_str_helper(StringBuffer)
        >>> helper("hello")
        StringBuffer('hello', encoding='UTF-8')
        >>> helper("hello", "ISO-8859-1").encoding
        'ISO-8859-1'
    """

    def str_helper(value: BufferValue, encoding: str = DEFAULT_ENCODING) -> StringBuffer:
        """Return ``buffer_factory(value, encoding)``."""
        return buffer_factory(value, encoding)

    str_helper.__name__ = STR_HELPER_NAME
    str_helper.__qualname__ = STR_HELPER_NAME
    return str_helper


__all__ = [
    "HelperNamespace",
    "STR_HELPER_NAME",
    "build_str_helper",
]
