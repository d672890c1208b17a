"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``BufferSettings``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.buffer import BufferValue, StringBuffer
from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import BufferSettings
    from ..domain.helpers import HelperNamespace


class BufferFactory(Protocol):
    """Build a string buffer from a value and an encoding."""

    def __call__(self, value: BufferValue, encoding: str) -> StringBuffer: ...


class InstallHelpers(Protocol):
    """Register the ``str`` helper into a namespace unless already present."""

    def __call__(
        self,
        namespace: HelperNamespace | None = ...,
        *,
        buffer_factory: BufferFactory | None = ...,
    ) -> bool: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadBufferSettings(Protocol):
    """Load BufferSettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> BufferSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BufferFactory",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "InstallHelpers",
    "LoadBufferSettings",
]
