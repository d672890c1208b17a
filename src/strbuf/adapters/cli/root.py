"""The ``strbuf`` command group.

Every invocation goes through :func:`cli` first: it resolves configuration,
starts logging and makes sure the ``str`` helper is installed before any
subcommand runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from strbuf import __init__conf__
from strbuf.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from strbuf.composition import AppServices

logger = logging.getLogger(__name__)


def _resolve_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load the layered config for ``profile`` and merge ``--set`` values.

    Raises:
        click.BadParameter: If the profile name is rejected.
        click.UsageError: If an override is malformed.
    """
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _bootstrap(services: AppServices, config: Config) -> None:
    """Start logging, then install the ``str`` helper unless one exists."""
    services.init_logging(config)
    if services.install_helpers(services.helpers):
        logger.debug("str helper installed for this process")


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full Python traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Read configuration from profile/NAME/ (e.g. 'staging')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. strbuf.default_encoding=latin-1 (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration, logging and helpers for the subcommand.

    Prints the help text when no subcommand is given.

    Example:
        >>> from click.testing import CliRunner
        >>> from strbuf.composition import build_production
        >>> result = CliRunner().invoke(cli, ["wrap", "hello"], obj=build_production)
        >>> result.exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any

    config = _resolve_config(services, profile, set_overrides)
    _bootstrap(services, config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Imported late: the command modules import this package.
def _register_commands() -> None:
    from .commands import cli_config, cli_helpers, cli_info, cli_wrap

    for cmd in (cli_info, cli_wrap, cli_helpers, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
