"""Shared pytest fixtures for library, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English; tests receive
them implicitly via pytest's conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from strbuf.adapters.memory.buffer import BufferSpy
    from strbuf.composition import AppServices

_COVERAGE_BASENAME = ".coverage.strbuf"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory."""
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from strbuf.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def pristine_helpers() -> Iterator[None]:
    """Run the test against an empty process-wide helper namespace.

    The namespace is emptied before and after, so tests never see each
    other's registrations.
    """
    from strbuf.application.registry import reset_helpers

    reset_helpers()
    try:
        yield
    finally:
        reset_helpers()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test."""
    from strbuf.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


def _services_with(**replacements: Any) -> AppServices:
    """Production services with selected ports replaced."""
    from dataclasses import replace

    from strbuf.composition import build_production

    return replace(build_production(), **replacements)


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only the I/O boundary (``get_config``) is replaced; the real Config API,
    logging and helper namespace stay in place.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"strbuf": {"default_encoding": "ascii"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(get_config=_fake_get_config)
        return lambda: services

    return _create


@dataclass
class SpyCliContext:
    """Services factory paired with the BufferSpy it wires in.

    Attributes:
        factory: Callable returning AppServices for ``cli_runner.invoke(obj=...)``.
        spy: BufferSpy recording every ``(value, encoding)`` the helper forwards.
    """

    factory: Callable[[], Any]
    spy: BufferSpy


@pytest.fixture
def spy_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], SpyCliContext]:
    """Create a CLI context whose ``str`` helper forwards to a BufferSpy.

    Each call gets its own helper namespace, so the process-wide one is
    never touched.

    Example:
        def test_wrap(cli_runner, spy_cli_context) -> None:
            ctx = spy_cli_context({})
            cli_runner.invoke(cli, ["wrap", "hello"], obj=ctx.factory)
            assert ctx.spy.calls == [("hello", "UTF-8")]
    """
    from strbuf.adapters.memory import BufferSpy as BufferSpyImpl
    from strbuf.domain.helpers import HelperNamespace

    def _create(config_data: dict[str, Any]) -> SpyCliContext:
        spy = BufferSpyImpl()
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(
            get_config=_fake_get_config,
            install_helpers=spy.install_helpers,
            helpers=HelperNamespace(),
        )
        return SpyCliContext(factory=lambda: services, spy=spy)

    return _create
