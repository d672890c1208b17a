"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "strbuf"
#: Human-readable summary shown in CLI help output.
title = "Create string buffers through a registered str helper"
#: Current release version.
version = "1.0.0"
#: Author attribution surfaced in CLI output.
author = "bitranox"
#: Console-script name published by the package.
shell_command = "strbuf"

#: Vendor, application, and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR: str = "bitranox"
LAYEREDCONF_APP: str = "strbuf"
LAYEREDCONF_SLUG: str = "strbuf"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for strbuf:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
