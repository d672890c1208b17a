"""In-memory buffer adapters for testing.

Contents:
    * :class:`BufferSpy` - Records every buffer construction the ``str``
      helper forwards, and installs helpers into private namespaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...application.ports import BufferFactory
from ...application.registry import install_helpers
from ...domain.buffer import BufferValue, StringBuffer
from ...domain.helpers import HelperNamespace


def _empty_call_list() -> list[tuple[BufferValue, str]]:
    return []


@dataclass
class BufferSpy:
    """Capture ``(value, encoding)`` pairs passed to the buffer constructor.

    Attributes:
        calls: Arguments of every construction, in call order.
        raise_exception: When set, construction raises this exception after
            recording the call.

    Example:
        >>> spy = BufferSpy()
        >>> ns = HelperNamespace()
        >>> spy.install_helpers(ns)
        True
        >>> ns.str("hello")
        StringBuffer('hello', encoding='UTF-8')
        >>> spy.calls
        [('hello', 'UTF-8')]
    """

    calls: list[tuple[BufferValue, str]] = field(default_factory=_empty_call_list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        self.calls.clear()
        self.raise_exception = None

    def create(self, value: BufferValue, encoding: str) -> StringBuffer:
        """Record the call, then build a real buffer (or raise the staged error)."""
        self.calls.append((value, encoding))
        if self.raise_exception is not None:
            raise self.raise_exception
        return StringBuffer(value, encoding)

    def install_helpers(
        self,
        namespace: HelperNamespace | None = None,
        *,
        buffer_factory: BufferFactory | None = None,
    ) -> bool:
        """Install the ``str`` helper wired to :meth:`create`.

        Never touches the process-wide namespace: without ``namespace`` a
        throwaway one is used. ``buffer_factory`` is ignored; the spy is
        always the factory.
        """
        target = namespace if namespace is not None else HelperNamespace()
        return install_helpers(target, buffer_factory=self.create)


__all__ = ["BufferSpy"]
