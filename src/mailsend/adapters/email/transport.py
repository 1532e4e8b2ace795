"""SMTP transport: verify the session, then transmit exactly once.

Wraps :mod:`smtplib`. Implicit TLS uses :class:`smtplib.SMTP_SSL`; otherwise
a plain :class:`smtplib.SMTP` session is upgraded with STARTTLS when
required. There is no retry: the first failure is reported as
:class:`~mailsend.domain.errors.TransportError`.
"""

from __future__ import annotations

import logging
import smtplib
import ssl
from collections.abc import Callable

from mailsend.adapters.config.settings import TransportSettings
from mailsend.domain.errors import TransportError
from mailsend.domain.models import DeliveryReceipt, ResolvedConfig

from .message import build_message

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "secret",
        "token",
    }
)

_GENERIC_FAILURE = "Check SMTP configuration and credentials."


def _sanitize_exception_message(exc: BaseException) -> str:
    """Sanitize exception message to prevent credential exposure.

    Example:
        >>> _sanitize_exception_message(ConnectionRefusedError("Connection refused"))
        'Connection refused'
        >>> _sanitize_exception_message(ValueError("bad password hunter2"))
        'Check SMTP configuration and credentials.'
    """
    message = str(exc) or type(exc).__name__
    if any(keyword in message.lower() for keyword in _SENSITIVE_KEYWORDS):
        return _GENERIC_FAILURE
    return message


def _open_session(config: ResolvedConfig, timeout: float) -> smtplib.SMTP:
    host = config.host or ""
    if config.secure:
        return smtplib.SMTP_SSL(host, config.port, timeout=timeout, context=ssl.create_default_context())
    return smtplib.SMTP(host, config.port, timeout=timeout)


def _verify_session(session: smtplib.SMTP, config: ResolvedConfig) -> None:
    """Greet, upgrade to TLS when required, and authenticate.

    Raises:
        smtplib.SMTPNotSupportedError: When STARTTLS is required but not offered.
    """
    session.ehlo()
    if config.starttls:
        session.starttls(context=ssl.create_default_context())
        session.ehlo()
    if config.user and config.password:
        session.login(config.user, config.password)


def send_message(
    config: ResolvedConfig,
    *,
    settings: TransportSettings | None = None,
    on_verified: Callable[[], None] | None = None,
) -> DeliveryReceipt:
    """Send the message described by a validated configuration.

    Args:
        config: Validated configuration; consumed once.
        settings: Session settings (timeout). Defaults apply when None.
        on_verified: Called once the session is connected, encrypted and
            authenticated, before the message is transmitted.

    Returns:
        Receipt with the Message-ID and the accepted and refused recipients.

    Raises:
        TransportError: Connection, TLS, authentication or delivery failure.
        OSError: When an attachment cannot be read.

    Side Effects:
        Opens a network connection and transmits the message. Logs the
        attempt at INFO level and failures at ERROR level.
    """
    transport = settings if settings is not None else TransportSettings()
    message = build_message(config)
    recipients = list(config.all_recipients)
    log_extra = {
        "host": config.host,
        "port": config.port,
        "security": config.security.value,
        "recipients": recipients,
        "subject": config.subject,
        "attachment_count": len(config.attachments),
    }
    logger.info("Connecting to SMTP server", extra=log_extra)

    try:
        session = _open_session(config, transport.timeout)
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("SMTP connection failed", extra={**log_extra, "error_type": type(exc).__name__})
        raise TransportError(f"SMTP connection failed: {_sanitize_exception_message(exc)}") from exc

    with session:
        try:
            _verify_session(session, config)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP verification failed", extra={**log_extra, "error_type": type(exc).__name__})
            raise TransportError(f"SMTP connection failed: {_sanitize_exception_message(exc)}") from exc

        logger.debug("SMTP connection verified", extra=log_extra)
        if on_verified is not None:
            on_verified()

        try:
            refused = session.send_message(message, from_addr=config.from_address, to_addrs=recipients)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery failed", extra={**log_extra, "error_type": type(exc).__name__})
            raise TransportError(f"Failed to send email: {_sanitize_exception_message(exc)}") from exc

    refused_replies = {rcpt: f"{code} {reply.decode(errors='replace')}" for rcpt, (code, reply) in refused.items()}
    receipt = DeliveryReceipt(
        message_id=str(message["Message-ID"]),
        accepted=tuple(r for r in recipients if r not in refused_replies),
        refused=refused_replies,
    )
    logger.info(
        "Email sent successfully",
        extra={**log_extra, "message_id": receipt.message_id, "refused": sorted(refused_replies)},
    )
    return receipt


__all__ = ["send_message"]
