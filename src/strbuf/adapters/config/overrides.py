"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

logger = logging.getLogger(__name__)

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted_key(self) -> str:
        return ".".join((self.section, *self.key_path))


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    Everything before the first ``=`` is the dotted path, everything after it
    is the value (which may itself contain ``=``). The first path component
    is the section.

    Raises:
        ValueError: If the string lacks ``=``, has no dot in the path, or has
            an empty path component.

    Examples:
        >>> override = parse_override("strbuf.default_encoding=ISO-8859-1")
        >>> override.section, override.key_path, override.value
        ('strbuf', ('default_encoding',), 'ISO-8859-1')

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path_part, sep, value_str = raw.partition("=")
    if not sep:
        raise ValueError(f"--set {raw!r} must contain '=' between key and value")

    section, dot, key_part = path_part.partition(".")
    if not dot:
        raise ValueError(f"--set {raw!r}: key needs at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"--set {raw!r}: section name is empty")

    key_path = tuple(key_part.split("."))
    if not all(key_path):
        raise ValueError(f"--set {raw!r}: key path has an empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON when possible, else keep it as a string.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value("UTF-8")
        'UTF-8'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Merge one override into the nested dict handed to ``Config.with_overrides``."""
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"strbuf": {"default_encoding": "UTF-8"}}, {})
        >>> apply_overrides(cfg, ("strbuf.default_encoding=ascii",))["strbuf"]["default_encoding"]
        'ascii'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        _merge_into(merged, override)
        logger.debug("Applying config override", extra={"key": override.dotted_key})

    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
