"""``strbuf config``: show the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from strbuf.adapters.config.overrides import apply_overrides
from strbuf.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ..options import format_option

logger = logging.getLogger(__name__)


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Return the config to show together with the profile it came from.

    Without ``profile`` the root group's config is reused. Otherwise the
    profile is loaded afresh and the root ``--set`` values are merged again.
    """
    if not profile or profile == cli_ctx.profile:
        return cli_ctx.config, cli_ctx.profile
    try:
        reloaded = cli_ctx.services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
@click.option("--section", default=None, metavar="NAME", help="Show only this section, e.g. 'strbuf'")
@click.option("--profile", default=None, metavar="NAME", help="Show another profile than the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: OutputFormat, section: str | None, profile: str | None) -> None:
    """Print configuration merged from every source.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _config_for_profile(cli_ctx, profile)

    extra = {"command": "config", "format": output_format.value, "profile": shown_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Showing configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=output_format, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
