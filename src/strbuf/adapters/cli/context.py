"""Per-invocation CLI state and traceback flag handling.

Contents:
    * :class:`CLIContext` - what the root group resolved for subcommands.
    * :class:`TracebackState` - the two ``lib_cli_exit_tools`` traceback flags.
    * :func:`preserved_traceback_state` - scope that restores those flags.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from strbuf.domain.helpers import STR_HELPER_NAME

if TYPE_CHECKING:
    from strbuf.composition import AppServices
    from strbuf.domain.buffer import StringBuffer


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config`` at one point in time."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State the root group hands to every subcommand.

    ``set_overrides`` is kept so a subcommand that reloads another profile
    can reapply the root ``--set`` options.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    @property
    def str_helper(self) -> Callable[..., StringBuffer]:
        """The ``str`` helper registered in this invocation's namespace.

        Raises:
            KeyError: If nothing is registered under ``str``.
        """
        return self.services.helpers[STR_HELPER_NAME]


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> CLIContext:
    """Replace the services factory in ``ctx.obj`` with resolved state."""
    cli_ctx = CLIContext(traceback, config, services, profile, set_overrides)
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If no CLIContext exists in the context chain.

    Example:
        >>> from strbuf.composition import build_testing
        >>> ctx = click.Context(click.Command("wrap"))
        >>> stored = store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing())
        >>> get_cli_context(ctx) is stored
        True
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return cli_ctx


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags.

    Example:
        >>> state = snapshot_traceback_state()
        >>> state._fields
        ('enabled', 'force_color')
    """
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off together."""
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


@contextmanager
def preserved_traceback_state(*, restore: bool = True) -> Iterator[TracebackState]:
    """Yield the flags as they were on entry and put them back on exit.

    With ``restore=False`` whatever the body set is kept.
    """
    previous = snapshot_traceback_state()
    try:
        yield previous
    finally:
        if restore:
            restore_traceback_state(previous)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
