"""Helper registrar stories: one-time installation and collision avoidance."""

from __future__ import annotations

import threading

import pytest

import strbuf
from strbuf.application import registry
from strbuf.domain.buffer import StringBuffer
from strbuf.domain.helpers import HelperNamespace


@pytest.mark.os_agnostic
def test_install_registers_str_when_absent(pristine_helpers: None) -> None:
    """After installation the helper exists and builds UTF-8 buffers."""
    assert registry.is_installed() is False

    assert registry.install_helpers() is True

    assert registry.is_installed() is True
    assert registry.helpers.str("hello") == StringBuffer("hello", "UTF-8")
    assert registry.helpers.str("hello", "ISO-8859-1") == StringBuffer("hello", "ISO-8859-1")


@pytest.mark.os_agnostic
def test_second_install_is_a_no_op(pristine_helpers: None) -> None:
    """Installing twice keeps the first helper and reports False."""
    registry.install_helpers()
    first = registry.helpers.str

    assert registry.install_helpers() is False
    assert registry.helpers.str is first


@pytest.mark.os_agnostic
def test_existing_str_helper_is_left_untouched(pristine_helpers: None) -> None:
    """A pre-registered ``str`` survives installation unchanged."""

    def custom_str(value: object, encoding: str = "ascii") -> str:
        return f"custom:{value}"

    registry.helpers.register("str", custom_str)

    assert registry.install_helpers() is False
    assert registry.helpers.str is custom_str
    assert registry.helpers.str("x") == "custom:x"


@pytest.mark.os_agnostic
def test_later_factory_does_not_replace_installed_helper(pristine_helpers: None) -> None:
    """Once installed, a different factory cannot take over the name."""
    registry.install_helpers()
    calls: list[tuple[object, str]] = []

    registry.install_helpers(buffer_factory=lambda value, encoding: calls.append((value, encoding)))  # type: ignore[arg-type,return-value]
    registry.helpers.str("hello")

    assert calls == []


@pytest.mark.os_agnostic
def test_custom_namespace_is_independent_of_process_wide_one(pristine_helpers: None) -> None:
    """Installing into a private namespace leaves the shared one empty."""
    ns = HelperNamespace()

    assert registry.install_helpers(ns) is True

    assert registry.is_installed(ns) is True
    assert registry.is_installed() is False


@pytest.mark.os_agnostic
def test_custom_factory_receives_exact_arguments() -> None:
    """The installed helper forwards to the injected factory."""
    ns = HelperNamespace()
    calls: list[tuple[object, str]] = []

    def factory(value: object, encoding: str) -> StringBuffer:
        calls.append((value, encoding))
        return StringBuffer("stub")

    registry.install_helpers(ns, buffer_factory=factory)  # type: ignore[arg-type]
    ns.str("hello")
    ns.str(b"raw", "ISO-8859-1")

    assert calls == [("hello", "UTF-8"), (b"raw", "ISO-8859-1")]


@pytest.mark.os_agnostic
def test_reset_helpers_allows_reinstallation(pristine_helpers: None) -> None:
    """reset_helpers forgets the registration."""
    registry.install_helpers()

    registry.reset_helpers()

    assert registry.is_installed() is False
    assert registry.install_helpers() is True


@pytest.mark.os_agnostic
def test_install_after_clearing_shared_namespace_registers_again(pristine_helpers: None) -> None:
    """Clearing the namespace directly makes the next install register str."""
    assert registry.install_helpers() is True

    registry.helpers.clear()

    assert registry.is_installed() is False
    assert registry.install_helpers() is True
    assert registry.is_installed() is True
    assert registry.helpers.str("again") == StringBuffer("again", "UTF-8")


@pytest.mark.os_agnostic
def test_concurrent_installs_register_exactly_once(pristine_helpers: None) -> None:
    """Racing threads see a single successful installation."""
    results: list[bool] = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        results.append(registry.install_helpers())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
    assert results.count(False) == 7


@pytest.mark.os_agnostic
def test_package_root_exposes_registrar(pristine_helpers: None) -> None:
    """The public package surface is the same process-wide namespace."""
    assert strbuf.helpers is registry.helpers

    strbuf.install_helpers()

    assert strbuf.is_installed()
    assert strbuf.helpers.str("hi") == strbuf.StringBuffer("hi")
