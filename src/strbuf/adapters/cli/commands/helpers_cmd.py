"""List the helpers registered in the CLI's helper namespace."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click

from strbuf.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..options import format_option

logger = logging.getLogger(__name__)


def describe_signature(func: Callable[..., Any]) -> str:
    """Return the call signature of ``func`` without annotations.

    Example:
        >>> def sample(value, encoding: str = "UTF-8") -> str: ...
        >>> describe_signature(sample)
        "(value, encoding='UTF-8')"
    """
    sig = inspect.signature(func)
    bare = [param.replace(annotation=inspect.Parameter.empty) for param in sig.parameters.values()]
    return str(sig.replace(parameters=bare, return_annotation=inspect.Signature.empty))


@click.command("helpers", context_settings=CLICK_CONTEXT_SETTINGS)
@format_option
@click.pass_context
def cli_helpers(ctx: click.Context, output_format: OutputFormat) -> None:
    """Show every registered helper with its call signature."""
    cli_ctx = get_cli_context(ctx)
    namespace = cli_ctx.services.helpers

    with lib_log_rich.runtime.bind(job_id="cli-helpers", extra={"command": "helpers", "format": output_format.value}):
        logger.info("Listing helpers", extra={"count": len(namespace)})
        entries = [{"name": name, "signature": describe_signature(namespace[name])} for name in namespace]
        if output_format is OutputFormat.JSON:
            click.echo(orjson.dumps(entries).decode())
            return
        if not entries:
            click.echo("No helpers registered.")
            return
        for entry in entries:
            click.echo(f"{entry['name']}{entry['signature']}")


__all__ = ["cli_helpers", "describe_signature"]
