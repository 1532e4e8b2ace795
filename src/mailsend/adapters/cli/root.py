"""The ``mailsend`` command.

A single Click command: every flag describes the one message to send.

Contents:
    * :func:`cli` - Parse flags, then resolve, validate and dispatch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import lib_log_rich.runtime
import rich_click as click

from mailsend import __init__conf__
from mailsend.domain.enums import Priority
from mailsend.domain.models import DEFAULT_PORT

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .invocation import RAW_ARGS_META_KEY, OrderedArgsCommand, build_raw_invocation
from .send import execute_send

if TYPE_CHECKING:
    from mailsend.composition import AppServices

EPILOG = f"""\b
Examples:
  {__init__conf__.shell_command} --to user@example.com --subject "Hello" --text "Hi there"
  {__init__conf__.shell_command} --to user@example.com --subject "Report" --html "<p>See attached</p>" --attach ./report.pdf
  {__init__conf__.shell_command} --account work --to alice@example.com --to bob@example.com --subject "Meeting" --text "3pm today"
"""


@click.command(
    __init__conf__.shell_command,
    cls=OrderedArgsCommand,
    help=__init__conf__.title,
    epilog=EPILOG,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--to", "to", multiple=True, metavar="EMAIL", help="Recipient email (can specify multiple)")
@click.option("--cc", "cc", multiple=True, metavar="EMAIL", help="CC recipient (can specify multiple)")
@click.option("--bcc", "bcc", multiple=True, metavar="EMAIL", help="BCC recipient (can specify multiple)")
@click.option("--subject", default=None, help="Email subject")
@click.option("--text", default=None, help="Plain text body")
@click.option("--html", default=None, help="HTML body (takes precedence over --text, which becomes the fallback)")
@click.option("--from", "from_address", default=None, metavar="EMAIL", help="Sender email (default: EMAIL_FROM env var)")
@click.option("--reply-to", "reply_to", default=None, metavar="EMAIL", help="Reply-to address")
@click.option(
    "--attach",
    "attach",
    multiple=True,
    metavar="PATH",
    help="Attach file (can specify multiple)",
)
@click.option("--attach-name", "attach_name", default=None, metavar="NAME", help="Custom filename for last attachment")
@click.option(
    "--priority",
    type=click.Choice([p.value for p in Priority], case_sensitive=False),
    default=None,
    help="Email priority",
)
@click.option("--account", default=None, help="Use account from config file (e.g., gmail, qq, work)")
@click.option(
    "--config",
    "config_path",
    default=None,
    metavar="PATH",
    help="Path to YAML account config file (default: email-config.yml next to the install directory)",
)
@click.option("--host", default=None, help="SMTP server (default: EMAIL_HOST env var)")
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=None,
    help=f"SMTP port (default: EMAIL_PORT or {DEFAULT_PORT})",
)
@click.option("--user", default=None, help="SMTP username (default: EMAIL_USER env var)")
@click.option("--pass", "password", default=None, help="SMTP password (default: EMAIL_PASS env var)")
@click.option("--secure", is_flag=True, default=False, help="Use SSL/TLS (port 465)")
@click.option("--tls", is_flag=True, default=False, help="Use STARTTLS (port 587, default)")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, **params: Any) -> None:
    """Send one email over SMTP.

    Loads the layered configuration once, initialises logging, then hands
    the parsed flags to :func:`mailsend.adapters.cli.send.execute_send`.
    ``--secure``, ``--tls``, ``--attach`` and ``--attach-name`` are read
    from the raw argument order rather than from ``params``.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config()
    services.init_logging(config)
    cli_ctx = store_cli_context(ctx, traceback=traceback, config=config, services=services)
    apply_traceback_preferences(traceback)

    raw = build_raw_invocation(params, ctx.meta.get(RAW_ARGS_META_KEY, ()))
    extra = {
        "command": "send",
        "recipients": list(raw.to),
        "subject": raw.subject,
        "account": raw.account,
        "attachment_count": len(raw.attachments),
    }
    with lib_log_rich.runtime.bind(job_id="cli-send", extra=extra):
        exit_code = execute_send(raw, cli_ctx)
    ctx.exit(int(exit_code))


__all__ = ["cli"]
