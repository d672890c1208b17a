"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import load_buffer_settings

# Logging services
from ..adapters.logging.setup import init_logging

# Helper registration
from ..application.registry import helpers, install_helpers
from ..domain.helpers import HelperNamespace

if TYPE_CHECKING:
    from ..adapters.memory.buffer import BufferSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        InstallHelpers,
        LoadBufferSettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_buffer_settings: LoadBufferSettings = load_buffer_settings
    _assert_init_logging: InitLogging = init_logging
    _assert_install_helpers: InstallHelpers = install_helpers


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations.

    ``helpers`` is the namespace the CLI installs into and resolves the
    ``str`` helper from.
    """

    get_config: GetConfig
    display_config: DisplayConfig
    load_buffer_settings: LoadBufferSettings
    init_logging: InitLogging
    install_helpers: InstallHelpers
    helpers: HelperNamespace


def build_production() -> AppServices:
    """Wire production adapters and the process-wide helper namespace."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_buffer_settings=load_buffer_settings,
        init_logging=init_logging,
        install_helpers=install_helpers,
        helpers=helpers,
    )


def build_testing(*, spy: BufferSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional BufferSpy capturing the buffers the ``str`` helper
            builds. When None, a fresh spy is created.

    Returns:
        AppServices with in-memory adapters and a private helper namespace.
    """
    from ..adapters.memory import (
        BufferSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_buffer_settings_in_memory,
    )

    buffer_spy = spy if spy is not None else BufferSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_buffer_settings=load_buffer_settings_in_memory,
        init_logging=init_logging_in_memory,
        install_helpers=buffer_spy.install_helpers,
        helpers=HelperNamespace(),
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    "load_buffer_settings",
    # Logging
    "init_logging",
    # Helpers
    "helpers",
    "install_helpers",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
