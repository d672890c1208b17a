"""CLI command implementations.

Contents:
    * :func:`.info.cli_info` - Package metadata
    * :func:`.wrap_cmd.cli_wrap` - Build and print a string buffer
    * :func:`.helpers_cmd.cli_helpers` - List registered helpers
    * :func:`.config.cli_config` - Display merged configuration
"""

from __future__ import annotations

from .config import cli_config
from .helpers_cmd import cli_helpers
from .info import cli_info
from .wrap_cmd import cli_wrap

__all__ = [
    "cli_config",
    "cli_helpers",
    "cli_info",
    "cli_wrap",
]
