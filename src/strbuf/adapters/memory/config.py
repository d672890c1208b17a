"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem or lib_layered_config's discovery.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.settings import BufferSettings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


def load_buffer_settings_in_memory(config_dict: Mapping[str, Any]) -> BufferSettings:
    """Parse the ``strbuf`` section with the real model, skipping error wrapping."""
    return BufferSettings.model_validate(config_dict.get("strbuf") or {})


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_buffer_settings_in_memory",
]
