"""Wrap a value in a string buffer through the installed ``str`` helper.

Contents:
    * :func:`cli_wrap` - Build a buffer and print it.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click
from pydantic import ValidationError

from strbuf.adapters.config.settings import BufferSettings
from strbuf.domain.buffer import BufferValue, StringBuffer
from strbuf.domain.enums import OutputFormat
from strbuf.domain.errors import BufferValueError, ConfigurationError, InvalidEncodingError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ..options import format_option

logger = logging.getLogger(__name__)


def _load_settings(cli_ctx: CLIContext) -> BufferSettings:
    """Read ``[strbuf]`` settings, exiting with CONFIG_ERROR when invalid."""
    try:
        return cli_ctx.services.load_buffer_settings(cli_ctx.config.as_dict())
    except (ConfigurationError, ValidationError) as exc:
        logger.error("Invalid strbuf configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _build_buffer(cli_ctx: CLIContext, value: BufferValue, encoding: str) -> StringBuffer:
    """Call the installed ``str`` helper, exiting with INVALID_ARGUMENT on rejection."""
    str_helper = cli_ctx.str_helper
    try:
        return str_helper(value, encoding)
    except (InvalidEncodingError, BufferValueError) as exc:
        logger.error("Buffer construction failed", extra={"error": str(exc), "error_type": type(exc).__name__})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _emit(buffer: StringBuffer, output_format: OutputFormat) -> None:
    if output_format is OutputFormat.JSON:
        click.echo(orjson.dumps(buffer.as_dict()).decode())
    else:
        click.echo(str(buffer))


@click.command("wrap", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value", required=False)
@click.option(
    "--encoding",
    default=None,
    help="Encoding to create the buffer with (default: [strbuf] default_encoding)",
)
@format_option
@click.pass_context
def cli_wrap(ctx: click.Context, value: str | None, encoding: str | None, output_format: OutputFormat) -> None:
    r"""Wrap VALUE in a StringBuffer and print it.

    When VALUE is omitted, raw bytes are read from stdin and decoded with
    the chosen encoding. JSON output carries value, encoding and length.

    \b
    Examples:
      strbuf wrap hello
      strbuf wrap hello --encoding ISO-8859-1 --format json
      printf 'caf\xe9' | strbuf wrap --encoding latin-1
    """
    cli_ctx = get_cli_context(ctx)
    settings = _load_settings(cli_ctx)
    effective_encoding = encoding if encoding is not None else settings.default_encoding
    source = "argument" if value is not None else "stdin"

    extra = {"command": "wrap", "encoding": effective_encoding, "source": source, "format": output_format.value}
    with lib_log_rich.runtime.bind(job_id="cli-wrap", extra=extra):
        raw: BufferValue = value if value is not None else click.get_binary_stream("stdin").read()
        logger.info("Wrapping value", extra={"encoding": effective_encoding, "source": source})
        _emit(_build_buffer(cli_ctx, raw, effective_encoding), output_format)


__all__ = ["cli_wrap"]
