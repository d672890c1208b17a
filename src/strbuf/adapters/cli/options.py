"""Click options shared by several commands."""

from __future__ import annotations

import rich_click as click

from strbuf.domain.enums import OutputFormat


def _to_output_format(_ctx: click.Context, _param: click.Parameter, value: str) -> OutputFormat:
    return OutputFormat(value.lower())


#: ``--format human|json``; the command receives an :class:`OutputFormat`.
format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    callback=_to_output_format,
    help="Output format",
)

__all__ = ["format_option"]
