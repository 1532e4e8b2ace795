"""Drive one send: resolve, validate, dispatch, report.

Keeps the command function in :mod:`.root` thin. Every failure is terminal
and maps to :attr:`ExitCode.GENERAL_ERROR`; validation always completes
before any network activity.

Exception Priority Order:
    1. ConfigError -> unknown account, malformed document or settings
    2. MessageValidationError -> one ``  - <problem>`` line per problem
    3. TransportError -> connection, authentication or delivery failure
    4. OSError -> attachment vanished or became unreadable after validation

    Anything else propagates to :func:`mailsend.adapters.cli.main.main`,
    where ``lib_cli_exit_tools`` prints it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import rich_click as click

from mailsend.adapters.config.settings import TransportSettings, load_accounts_settings, load_transport_settings
from mailsend.domain.errors import ConfigError, MessageValidationError, TransportError
from mailsend.domain.models import DeliveryReceipt, RawInvocation, ResolvedConfig
from mailsend.domain.resolver import resolve
from mailsend.domain.validator import ensure_valid

from .constants import CHECK_MARK, CROSS_MARK
from .context import CLIContext
from .exit_codes import ExitCode

logger = logging.getLogger(__name__)


def account_document_path(raw: RawInvocation, cli_ctx: CLIContext) -> Path:
    """Choose the account document: ``--config``, then ``[accounts] config_file``, then the bundled default."""
    if raw.config_path:
        return Path(raw.config_path)
    configured = load_accounts_settings(cli_ctx.config.as_dict()).config_file
    if configured is not None:
        return configured
    return cli_ctx.services.get_default_account_document_path()


def _prepare(raw: RawInvocation, cli_ctx: CLIContext) -> tuple[ResolvedConfig, TransportSettings]:
    services = cli_ctx.services
    settings = load_transport_settings(cli_ctx.config.as_dict())
    env = services.read_environment_defaults()
    document = services.load_account_document(account_document_path(raw, cli_ctx))
    resolved = resolve(raw, env, document)
    if resolved.account is not None:
        logger.info("Using account", extra={"account": resolved.account})
        click.echo(f"{CHECK_MARK} Using account: {resolved.account}")
    return resolved, settings


def _report_problems(exc: MessageValidationError) -> None:
    logger.warning("Validation failed", extra={"problems": list(exc.problems)})
    click.echo("Error: Missing required options\n", err=True)
    for problem in exc.problems:
        click.echo(f"  - {problem}", err=True)
    click.echo("\nRun with --help for usage information", err=True)


def _report_failure(message: str, exc: Exception) -> ExitCode:
    logger.error(message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\n{CROSS_MARK} {exc}", err=True)
    return ExitCode.GENERAL_ERROR


def _echo_verified() -> None:
    click.echo(f"{CHECK_MARK} SMTP connection verified")


def _report_receipt(config: ResolvedConfig, receipt: DeliveryReceipt) -> None:
    click.echo(f"{CHECK_MARK} Email sent successfully")
    click.echo(f"  Message ID: {receipt.message_id}")
    click.echo(f"  To: {', '.join(config.to)}")
    click.echo(f"  Subject: {config.subject}")
    if config.attachments:
        click.echo(f"  Attachments: {len(config.attachments)}")
    if receipt.refused:
        click.echo(f"  Refused: {', '.join(sorted(receipt.refused))}", err=True)


def execute_send(raw: RawInvocation, cli_ctx: CLIContext) -> ExitCode:
    """Run the full send pipeline for one invocation.

    Args:
        raw: Flags as given on the command line.
        cli_ctx: Loaded configuration and wired services.

    Returns:
        ``ExitCode.SUCCESS`` after a delivery, ``ExitCode.GENERAL_ERROR`` otherwise.
    """
    try:
        resolved, settings = _prepare(raw, cli_ctx)
    except ConfigError as exc:
        return _report_failure("Configuration error", exc)

    try:
        ensure_valid(resolved, os.path.exists, is_valid_address=cli_ctx.services.is_valid_address)
    except MessageValidationError as exc:
        _report_problems(exc)
        return ExitCode.GENERAL_ERROR

    try:
        receipt = cli_ctx.services.send_message(resolved, settings=settings, on_verified=_echo_verified)
    except TransportError as exc:
        return _report_failure("SMTP delivery failed", exc)
    except OSError as exc:
        return _report_failure("Attachment could not be read", exc)

    _report_receipt(resolved, receipt)
    return ExitCode.SUCCESS


__all__ = ["account_document_path", "execute_send"]
