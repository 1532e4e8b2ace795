"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import dataclasses
import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import lib_cli_exit_tools
import pytest

from mailsend import __init__conf__, entry
from mailsend.adapters.cli.main import main
from mailsend.adapters.memory.email import DispatchSpy
from mailsend.composition import AppServices, build_production, build_testing
from mailsend.domain.models import EnvironmentDefaults

_MESSAGE_ARGS = ["--to", "a@test.com", "--subject", "Hi", "--text", "Body"]


def _testing_services(spy: DispatchSpy, env: EnvironmentDefaults) -> Callable[[], AppServices]:
    """In-memory services with the given environment and real logging."""
    services = dataclasses.replace(
        build_testing(spy=spy),
        read_environment_defaults=lambda environ=None: env,
        init_logging=build_production().init_logging,
    )
    return lambda: services


def _failing_services(message: str) -> Callable[[], AppServices]:
    """Services whose dispatcher raises an unexpected RuntimeError."""
    env = EnvironmentDefaults(host="smtp.test.com", user="u", password="p", from_address="me@test.com")
    return _testing_services(DispatchSpy(raise_exception=RuntimeError(message)), env)


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with --help shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["mailsend", "--help"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("mailsend.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_main_returns_usage_error_code(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Click usage errors are shown and mapped to exit code 2."""
    exit_code = main(["--port", "abc"], services_factory=build_production)

    assert exit_code == 2
    assert "--port" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_returns_validation_failure_code(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """ctx.exit codes from the command come back as main's return value."""
    exit_code = main(["--subject", "Hi"], services_factory=_testing_services(DispatchSpy(), EnvironmentDefaults()))

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "At least one recipient (--to) is required" in captured.err


def _services_reading_documents(spy: DispatchSpy) -> Callable[[], AppServices]:
    """In-memory dispatch, but account documents are read from disk."""
    services = dataclasses.replace(
        _testing_services(spy, EnvironmentDefaults())(),
        load_account_document=build_production().load_account_document,
    )
    return lambda: services


@pytest.mark.os_agnostic
def test_undecodable_account_document_exits_one(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """A document that is not UTF-8 is a configuration failure."""
    document = tmp_path / "email-config.yml"
    document.write_bytes(b"\xff\xfe")
    spy = DispatchSpy()

    exit_code = main(["--config", str(document), *_MESSAGE_ARGS], services_factory=_services_reading_documents(spy))

    assert exit_code == 1
    assert "Failed to load config file" in capsys.readouterr().err
    assert spy.sent == []


@pytest.mark.os_agnostic
def test_account_without_settings_is_not_found(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    """Selecting an entry with an empty body reports it as missing."""
    document = tmp_path / "email-config.yml"
    document.write_text("accounts:\n  work:\n", encoding="utf-8")

    exit_code = main(
        ["--config", str(document), "--account", "work", *_MESSAGE_ARGS],
        services_factory=_services_reading_documents(DispatchSpy()),
    )

    assert exit_code == 1
    assert "Account 'work' not found in config file" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_requires_services_factory() -> None:
    """Calling main without wiring is a programming error."""
    with pytest.raises(ValueError, match="services_factory is required"):
        main(["--help"])


@pytest.mark.os_agnostic
def test_unexpected_exceptions_are_formatted_via_exit_helpers(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """Errors outside the expected set are printed by lib_cli_exit_tools."""
    exit_code = main(_MESSAGE_ARGS, services_factory=_failing_services("I should fail"))

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "RuntimeError" in plain_err or "I should fail" in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_prints_full_traceback_and_restores_state(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the complete traceback; global flags are restored."""
    exit_code = main(["--traceback", *_MESSAGE_ARGS], services_factory=_failing_services("I should fail"))

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: I should fail" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Verify `python -m mailsend --help` works via subprocess."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "mailsend", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # Use UTF-8 with error replacement for Windows compatibility
        # (rich-click outputs Unicode that cp1252 can't decode)
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """Verify `python -m mailsend --version` outputs version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "mailsend", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["mailsend", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
