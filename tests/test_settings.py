"""BufferSettings model and ``[strbuf]`` section loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from strbuf.adapters.config.settings import BufferSettings, load_buffer_settings
from strbuf.adapters.memory import load_buffer_settings_in_memory
from strbuf.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_defaults_to_utf8() -> None:
    """Without configuration the CLI default matches the helper default."""
    assert BufferSettings().default_encoding == "UTF-8"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["", "   ", None])
def test_empty_values_fall_back_to_utf8(raw: object) -> None:
    """Blank values from TOML or env vars mean 'not configured'."""
    assert BufferSettings.model_validate({"default_encoding": raw}).default_encoding == "UTF-8"


@pytest.mark.os_agnostic
def test_surrounding_whitespace_is_stripped() -> None:
    """Padding from env files does not break codec lookup."""
    assert BufferSettings(default_encoding=" ascii ").default_encoding == "ascii"


@pytest.mark.os_agnostic
def test_unknown_codec_fails_validation() -> None:
    """Unknown codecs are rejected at the configuration boundary."""
    with pytest.raises(ValidationError, match="Unknown encoding"):
        BufferSettings(default_encoding="klingon")


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    """Settings are immutable once loaded."""
    settings = BufferSettings()

    with pytest.raises(ValidationError):
        settings.default_encoding = "ascii"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_unrelated_keys_are_ignored() -> None:
    """Future keys in the section do not break older releases."""
    assert load_buffer_settings({"strbuf": {"default_encoding": "ascii", "later": 1}}).default_encoding == "ascii"


@pytest.mark.os_agnostic
def test_missing_section_uses_defaults() -> None:
    """A config without [strbuf] is valid."""
    assert load_buffer_settings({"lib_log_rich": {}}).default_encoding == "UTF-8"


@pytest.mark.os_agnostic
def test_invalid_section_raises_configuration_error() -> None:
    """Validation failures are reported as ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"Invalid \[strbuf\] configuration"):
        load_buffer_settings({"strbuf": {"default_encoding": "klingon"}})


@pytest.mark.os_agnostic
def test_non_table_section_raises_configuration_error() -> None:
    """A scalar where a table belongs is a configuration error."""
    with pytest.raises(ConfigurationError, match="must be a table"):
        load_buffer_settings({"strbuf": "UTF-8"})


@pytest.mark.os_agnostic
def test_in_memory_loader_uses_the_real_model() -> None:
    """The in-memory adapter parses with the same validation rules."""
    assert load_buffer_settings_in_memory({"strbuf": {"default_encoding": "latin-1"}}).default_encoding == "latin-1"
