"""Shared pytest fixtures for CLI, adapter and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from mailsend.domain.models import AccountProfile, ConfigDocument, EnvironmentDefaults

if TYPE_CHECKING:
    from mailsend.adapters.memory.email import DispatchSpy
    from mailsend.composition import AppServices

_COVERAGE_BASENAME = ".coverage.mailsend"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a **local** temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value is honoured however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


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

    Use ``result.stdout`` / ``result.stderr`` when a test cares which stream
    a line went to; ``result.output`` holds both.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string.

    Example:
        def test_output(cli_runner: CliRunner, strip_ansi: Callable[[str], str]) -> None:
            result = cli_runner.invoke(cli, ["--help"])
            assert "--to" in strip_ansi(result.output)
    """

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Note: Only clears before, not after, to avoid errors when the function
    has been monkeypatched during the test (losing cache_clear method).
    """
    from mailsend.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_smtp_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"smtp": {"timeout": 5}})
            assert config.get("smtp.timeout") == 5
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def work_and_personal_document() -> ConfigDocument:
    """Account document with two profiles; ``work`` is the default.

    ``work`` uses implicit TLS on port 465 and carries a reply-to address;
    ``personal`` uses STARTTLS and has no port of its own.
    """
    return ConfigDocument(
        accounts={
            "work": AccountProfile(
                name="work",
                host="smtp.work.com",
                port=465,
                user="w",
                password="w-secret",
                from_address="w@work.com",
                reply_to="team@work.com",
                secure=True,
            ),
            "personal": AccountProfile(
                name="personal",
                host="smtp.home.net",
                user="me",
                password="me-secret",
                from_address="me@home.net",
                secure=False,
            ),
        },
        default="work",
    )


@dataclass
class SendCliContext:
    """Container for send CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: DispatchSpy instance for asserting on dispatched configurations.
        document_paths: Paths the CLI asked the account loader for, in order.
    """

    factory: Callable[[], Any]
    spy: DispatchSpy
    document_paths: list[Path] = field(default_factory=list)


@pytest.fixture
def send_cli_context(
    clear_config_cache: None,
    managed_traceback_state: None,
) -> Callable[..., SendCliContext]:
    """Create send CLI test context with injected inputs and a dispatch spy.

    Replaces every I/O boundary (layered config, environment, account
    document, SMTP) while keeping production logging and address checks.

    Keyword Args (of the returned function):
        config: Layered configuration data; empty when omitted.
        env: Environment defaults; empty when omitted.
        document: Account document returned for any path; ``None`` means
            "no document exists".

    Example:
        def test_send(cli_runner: CliRunner, send_cli_context: Callable[..., SendCliContext]) -> None:
            ctx = send_cli_context(env=EnvironmentDefaults(host="smtp.test.com", ...))
            result = cli_runner.invoke(cli, ["--to", "a@b.com", ...], obj=ctx.factory)
            assert ctx.spy.sent[0].host == "smtp.test.com"
    """
    from mailsend.adapters.memory.email import DispatchSpy as DispatchSpyImpl
    from mailsend.composition import AppServices, build_production

    def _create(
        *,
        config: dict[str, Any] | None = None,
        env: EnvironmentDefaults | None = None,
        document: ConfigDocument | None = None,
    ) -> SendCliContext:
        spy = DispatchSpyImpl()
        loaded = Config(config or {}, {})
        environment = env if env is not None else EnvironmentDefaults()
        prod = build_production()
        context = SendCliContext(factory=lambda: test_services, spy=spy)

        def _fake_get_config(**_kwargs: Any) -> Config:
            return loaded

        def _fake_read_environment_defaults(environ: Any = None) -> EnvironmentDefaults:
            return environment

        def _fake_load_account_document(path: str | Path) -> ConfigDocument | None:
            context.document_paths.append(Path(path))
            return document

        test_services = AppServices(
            get_config=_fake_get_config,
            load_account_document=_fake_load_account_document,
            get_default_account_document_path=lambda: Path("/nonexistent/email-config.yml"),
            read_environment_defaults=_fake_read_environment_defaults,
            send_message=spy.send_message,
            is_valid_address=prod.is_valid_address,
            init_logging=prod.init_logging,
        )
        return context

    return _create


@pytest.fixture
def smtp_env() -> EnvironmentDefaults:
    """Complete transport defaults as if exported in ``EMAIL_*`` variables."""
    return EnvironmentDefaults(
        host="smtp.env.test",
        port=2525,
        user="env-user",
        password="env-pass",
        from_address="env@sender.test",
    )
