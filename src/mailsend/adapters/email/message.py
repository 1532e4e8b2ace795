"""Build the MIME message for a resolved configuration.

Uses :class:`email.message.EmailMessage` for all MIME encoding.
"""

from __future__ import annotations

import mimetypes
from email.message import EmailMessage
from email.utils import formatdate, make_msgid, parseaddr
from pathlib import Path

from mailsend.domain.enums import Priority
from mailsend.domain.models import AttachmentRef, ResolvedConfig

#: Headers set per priority level; ``normal`` adds none.
PRIORITY_HEADERS: dict[Priority, dict[str, str]] = {
    Priority.HIGH: {"X-Priority": "1 (Highest)", "X-MSMail-Priority": "High", "Importance": "High"},
    Priority.NORMAL: {},
    Priority.LOW: {"X-Priority": "5 (Lowest)", "X-MSMail-Priority": "Low", "Importance": "Low"},
}

_FALLBACK_MIME_TYPE = "application/octet-stream"


def _msgid_domain(from_address: str | None) -> str | None:
    """Domain part of the sender, used to qualify the Message-ID.

    Example:
        >>> _msgid_domain("Ops <ops@example.com>")
        'example.com'
        >>> _msgid_domain(None) is None
        True
    """
    if not from_address:
        return None
    _name, addr = parseaddr(from_address)
    _local, _sep, domain = addr.rpartition("@")
    return domain or None


def _guess_mime_type(attachment: AttachmentRef) -> tuple[str, str]:
    """Return ``(maintype, subtype)`` guessed from the display filename.

    Example:
        >>> _guess_mime_type(AttachmentRef("./report.pdf"))
        ('application', 'pdf')
        >>> _guess_mime_type(AttachmentRef("./blob"))
        ('application', 'octet-stream')
    """
    mime_type, encoding = mimetypes.guess_type(attachment.display_name)
    if mime_type is None or encoding is not None:
        mime_type = _FALLBACK_MIME_TYPE
    maintype, _sep, subtype = mime_type.partition("/")
    return maintype, subtype


def _set_body(message: EmailMessage, config: ResolvedConfig) -> None:
    body = config.primary_body or ""
    if config.fallback_text is not None:
        message.set_content(config.fallback_text)
        message.add_alternative(body, subtype="html")
    else:
        message.set_content(body, subtype=config.primary_subtype)


def _attach(message: EmailMessage, attachment: AttachmentRef) -> None:
    data = Path(attachment.path).read_bytes()
    maintype, subtype = _guess_mime_type(attachment)
    message.add_attachment(data, maintype=maintype, subtype=subtype, filename=attachment.display_name)


def build_message(config: ResolvedConfig) -> EmailMessage:
    """Compose the message described by ``config``.

    BCC recipients are deliberately absent from the headers; the transport
    adds them to the SMTP envelope only.

    Args:
        config: A validated configuration.

    Returns:
        Message with headers, body parts and attachments.

    Raises:
        OSError: When an attachment cannot be read.

    Example:
        >>> cfg = ResolvedConfig(
        ...     from_address="me@example.com", to=("a@example.com",), bcc=("hidden@example.com",),
        ...     subject="Hi", text="Body",
        ... )
        >>> msg = build_message(cfg)
        >>> msg["To"], msg["Bcc"], msg.get_content_type()
        ('a@example.com', None, 'text/plain')
    """
    message = EmailMessage()
    message["From"] = config.from_address or ""
    message["To"] = ", ".join(config.to)
    if config.cc:
        message["Cc"] = ", ".join(config.cc)
    if config.reply_to:
        message["Reply-To"] = config.reply_to
    message["Subject"] = config.subject or ""
    message["Date"] = formatdate(localtime=True)
    message["Message-ID"] = make_msgid(domain=_msgid_domain(config.from_address))

    if config.priority is not None:
        for header, value in PRIORITY_HEADERS[config.priority].items():
            message[header] = value

    _set_body(message, config)
    for attachment in config.attachments:
        _attach(message, attachment)
    return message


__all__ = ["PRIORITY_HEADERS", "build_message"]
