"""Process-wide helper registrar.

Holds the shared :data:`helpers` namespace and the installation of the
``str`` helper into it. Installation is an explicit call made at startup
(the CLI root does it for every invocation). It registers ``str`` whenever
the name is free and is a no-op otherwise.

Contents:
    * :data:`helpers` - the process-wide :class:`HelperNamespace`.
    * :func:`install_helpers` - register the ``str`` helper unless present.
    * :func:`is_installed` - report whether ``str`` is available.
    * :func:`reset_helpers` - empty the process-wide namespace.
"""

from __future__ import annotations

import logging
import threading

from ..domain.buffer import StringBuffer
from ..domain.helpers import STR_HELPER_NAME, HelperNamespace, build_str_helper
from .ports import BufferFactory

logger = logging.getLogger(__name__)

helpers = HelperNamespace()

_lock = threading.Lock()


def install_helpers(
    namespace: HelperNamespace | None = None,
    *,
    buffer_factory: BufferFactory | None = None,
) -> bool:
    """Register the ``str`` helper unless the namespace already has one.

    Args:
        namespace: Target namespace. Defaults to the process-wide
            :data:`helpers` namespace.
        buffer_factory: Constructor the helper forwards to. Defaults to
            :class:`StringBuffer`.

    Returns:
        True when the helper was registered by this call, False when a helper
        named ``str`` already existed and was left untouched.

    Example:
        >>> ns = HelperNamespace()
        >>> install_helpers(ns)
        True
        >>> install_helpers(ns)
        False
        >>> ns.str("hello", "ISO-8859-1")
        StringBuffer('hello', encoding='ISO-8859-1')
    """
    target = helpers if namespace is None else namespace
    factory: BufferFactory = buffer_factory if buffer_factory is not None else StringBuffer

    with _lock:
        added = target.register(STR_HELPER_NAME, build_str_helper(factory))

    if added:
        logger.debug("Installed helper", extra={"helper": STR_HELPER_NAME, "factory": _factory_name(factory)})
    else:
        logger.debug("Helper name already taken, skipping", extra={"helper": STR_HELPER_NAME})
    return added


def is_installed(namespace: HelperNamespace | None = None) -> bool:
    """Return whether a ``str`` helper is available in ``namespace``."""
    target = helpers if namespace is None else namespace
    return STR_HELPER_NAME in target


def reset_helpers() -> None:
    """Clear the process-wide namespace.

    Intended for tests that need a pristine process state.
    """
    with _lock:
        helpers.clear()


def _factory_name(factory: object) -> str:
    return getattr(factory, "__qualname__", None) or type(factory).__name__


__all__ = [
    "helpers",
    "install_helpers",
    "is_installed",
    "reset_helpers",
]
