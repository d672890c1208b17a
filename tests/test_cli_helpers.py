"""``helpers`` command stories: listing what the namespace holds."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

import orjson
import pytest
from click.testing import CliRunner

from strbuf.adapters import cli as cli_mod
from strbuf.adapters.cli.commands.helpers_cmd import describe_signature
from strbuf.composition import build_production
from strbuf.domain.helpers import HelperNamespace


def _no_install(namespace: HelperNamespace | None = None, **_kwargs: Any) -> bool:
    return False


@pytest.mark.os_agnostic
def test_describe_signature_drops_annotations() -> None:
    """Only names and defaults remain."""

    def sample(value: object, encoding: str = "UTF-8") -> str:
        return ""

    assert describe_signature(sample) == "(value, encoding='UTF-8')"


@pytest.mark.os_agnostic
def test_helpers_lists_str_with_its_signature(
    cli_runner: CliRunner,
    spy_cli_context: Callable[[dict[str, Any]], Any],
) -> None:
    """After root setup the ``str`` helper is listed."""
    ctx = spy_cli_context({})

    result = cli_runner.invoke(cli_mod.cli, ["helpers"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout == "str(value, encoding='UTF-8')\n"


@pytest.mark.os_agnostic
def test_helpers_json_output(
    cli_runner: CliRunner,
    spy_cli_context: Callable[[dict[str, Any]], Any],
) -> None:
    """--format json emits a list of name/signature objects."""
    ctx = spy_cli_context({})

    result = cli_runner.invoke(cli_mod.cli, ["helpers", "--format", "json"], obj=ctx.factory)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout) == [{"name": "str", "signature": "(value, encoding='UTF-8')"}]


@pytest.mark.os_agnostic
def test_helpers_keeps_a_pre_registered_str(
    cli_runner: CliRunner,
    clear_config_cache: None,
) -> None:
    """An existing ``str`` helper survives root setup and is the one listed."""
    namespace = HelperNamespace()

    def legacy_str(text, codec="ascii"):
        return text

    namespace.register("str", legacy_str)
    services = replace(build_production(), helpers=namespace)

    result = cli_runner.invoke(cli_mod.cli, ["helpers"], obj=lambda: services)

    assert result.exit_code == 0
    assert result.stdout == "str(text, codec='ascii')\n"


@pytest.mark.os_agnostic
def test_helpers_reports_empty_namespace(
    cli_runner: CliRunner,
    clear_config_cache: None,
) -> None:
    """With nothing installed the command says so."""
    services = replace(build_production(), helpers=HelperNamespace(), install_helpers=_no_install)

    result = cli_runner.invoke(cli_mod.cli, ["helpers"], obj=lambda: services)

    assert result.exit_code == 0
    assert result.stdout == "No helpers registered.\n"
