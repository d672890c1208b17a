"""Application layer - ports and the process-wide helper registrar.

Contents:
    * :mod:`.ports` - Callable Protocols implemented by adapters
    * :mod:`.registry` - The shared helper namespace and its installer
"""

from __future__ import annotations

from .registry import helpers, install_helpers, is_installed, reset_helpers

__all__ = [
    "helpers",
    "install_helpers",
    "is_installed",
    "reset_helpers",
]
