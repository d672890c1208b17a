"""In-memory adapter implementations for testing.

Port implementations that keep everything in process memory. Nothing here
reads files or touches the process-wide helper namespace.

Contents:
    * :mod:`.buffer` - BufferSpy capturing helper calls
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .buffer import BufferSpy
from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_buffer_settings_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from strbuf.application.ports import (
        BufferFactory,
        DisplayConfig,
        GetConfig,
        InitLogging,
        InstallHelpers,
        LoadBufferSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_buffer_settings: LoadBufferSettings = load_buffer_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_buffer_factory: BufferFactory = BufferSpy().create
    _assert_install_helpers: InstallHelpers = BufferSpy().install_helpers

__all__ = [
    "BufferSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_buffer_settings_in_memory",
]
