"""Public package surface: string buffers, the helper namespace, and metadata.

Typical use::

    import strbuf

    strbuf.install_helpers()
    buf = strbuf.helpers.str("hello")            # StringBuffer('hello', encoding='UTF-8')
    buf = strbuf.helpers.str("hello", "latin-1")

Exports are routed through the architectural layers:
- Domain: StringBuffer, HelperNamespace, errors
- Application: the process-wide ``helpers`` namespace and its installer
- Composition: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.registry import helpers, install_helpers, is_installed, reset_helpers

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.buffer import DEFAULT_ENCODING, BufferValue, StringBuffer
from .domain.errors import BufferValueError, ConfigurationError, InvalidEncodingError, StrbufError
from .domain.helpers import HelperNamespace, build_str_helper

__all__ = [
    "DEFAULT_ENCODING",
    "BufferValue",
    "BufferValueError",
    "ConfigurationError",
    "HelperNamespace",
    "InvalidEncodingError",
    "StrbufError",
    "StringBuffer",
    "build_str_helper",
    "get_config",
    "helpers",
    "install_helpers",
    "is_installed",
    "print_info",
    "reset_helpers",
]
