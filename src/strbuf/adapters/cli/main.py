"""Process entry for the strbuf CLI.

:func:`main` runs the root group without Click's standalone handling so that
every outcome, including ``SystemExit`` raised by commands, becomes a plain
integer exit code. Used by the console script and ``python -m strbuf``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from strbuf import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import preserved_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from strbuf.composition import AppServices


def _report_unhandled(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code.

    The ``--traceback`` flag decides between a short summary and the full
    traceback.
    """
    verbose = snapshot_traceback_state().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(
            args=list(argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt included
        return _report_unhandled(exc)
    return 0


def _shutdown_logging() -> None:
    # worker threads share the runtime with the main thread
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were.
        services_factory: Callable returning AppServices, normally
            ``strbuf.composition.build_production``.

    Raises:
        ValueError: If services_factory is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = sys.argv[1:] if argv is None else argv
    try:
        with preserved_traceback_state(restore=restore_traceback):
            return _run_cli(args, services_factory)
    finally:
        _shutdown_logging()


__all__ = ["main"]
