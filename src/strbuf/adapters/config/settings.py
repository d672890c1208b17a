"""Buffer settings model and loader for the ``[strbuf]`` config section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from strbuf.domain.buffer import DEFAULT_ENCODING, validate_encoding
from strbuf.domain.errors import ConfigurationError, InvalidEncodingError


class BufferSettings(BaseModel):
    """Validated, immutable ``[strbuf]`` settings.

    Example:
        >>> BufferSettings().default_encoding
        'UTF-8'
        >>> BufferSettings(default_encoding="  latin-1 ").default_encoding
        'latin-1'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    default_encoding: str = DEFAULT_ENCODING

    @field_validator("default_encoding", mode="before")
    @classmethod
    def _check_encoding(cls, v: Any) -> str:
        """Strip whitespace, treat empty values as the default, require a known codec."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ENCODING
        if isinstance(v, str):
            v = v.strip()
        try:
            return validate_encoding(v)
        except InvalidEncodingError as exc:
            raise ValueError(str(exc)) from exc


def load_buffer_settings(config_dict: Mapping[str, Any]) -> BufferSettings:
    """Build BufferSettings from a full configuration dictionary.

    Args:
        config_dict: Configuration mapping, typically ``Config.as_dict()``.

    Returns:
        Settings parsed from the ``strbuf`` section, or defaults when absent.

    Raises:
        ConfigurationError: If the section holds invalid values.

    Example:
        >>> load_buffer_settings({"strbuf": {"default_encoding": "ascii"}}).default_encoding
        'ascii'
        >>> load_buffer_settings({}).default_encoding
        'UTF-8'
    """
    section = config_dict.get("strbuf") or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[strbuf] must be a table, got {type(section).__name__}")
    try:
        return BufferSettings.model_validate(dict(section))
    except ValidationError as exc:
        details = "; ".join(str(err["msg"]) for err in exc.errors())
        raise ConfigurationError(f"Invalid [strbuf] configuration: {details}") from exc


__all__ = [
    "BufferSettings",
    "load_buffer_settings",
]
