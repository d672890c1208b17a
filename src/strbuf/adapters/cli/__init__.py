"""Command-line interface for strbuf.

``strbuf`` exposes the ``str`` helper on the shell: ``wrap`` builds a buffer,
``helpers`` lists what is registered, ``config`` and ``info`` show the
environment. :func:`main` is the process entry, :data:`cli` the Click group.
"""

from __future__ import annotations

from .commands import cli_config, cli_helpers, cli_info, cli_wrap
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    preserved_traceback_state,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_helpers",
    "cli_info",
    "cli_wrap",
    "get_cli_context",
    "main",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
