"""Build a :class:`RawInvocation` from parsed Click parameters.

Click collects repeatable options into tuples and loses how they were
interleaved on the command line. Two behaviours depend on that order:
``--attach-name`` renames the most recent ``--attach``, and the last of
``--secure`` / ``--tls`` wins. :class:`OrderedArgsCommand` keeps the raw
argument list so :func:`scan_ordered_flags` can recover both.

Contents:
    * :class:`OrderedArgsCommand` - Click command that records its raw arguments.
    * :func:`scan_ordered_flags` - Pair attachments with names; find the last toggle.
    * :func:`build_raw_invocation` - Assemble the domain value.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, Final

import rich_click as click

from mailsend.domain.enums import Priority, TransportSecurity
from mailsend.domain.models import AttachmentRef, RawInvocation

RAW_ARGS_META_KEY: Final[str] = "mailsend.raw_args"

#: Long options that consume a value, mirroring the options on the command.
VALUE_FLAGS: Final[frozenset[str]] = frozenset(
    {
        "--to",
        "--cc",
        "--bcc",
        "--subject",
        "--text",
        "--html",
        "--from",
        "--reply-to",
        "--host",
        "--port",
        "--user",
        "--pass",
        "--attach",
        "--attach-name",
        "--priority",
        "--account",
        "--config",
    }
)

_SECURITY_TOGGLES: Final[dict[str, TransportSecurity]] = {
    "--secure": TransportSecurity.IMPLICIT_TLS,
    "--tls": TransportSecurity.STARTTLS,
}


class OrderedArgsCommand(click.RichCommand):
    """Click command that stores its unparsed arguments in ``ctx.meta``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_META_KEY] = tuple(args)
        return super().parse_args(ctx, args)


def scan_ordered_flags(args: Sequence[str]) -> tuple[tuple[AttachmentRef, ...], TransportSecurity | None]:
    """Walk the raw arguments in order.

    Returns the attachments with display names applied, and the last
    security toggle seen. An ``--attach-name`` that precedes every
    ``--attach`` is ignored. Scanning stops at ``--``.

    Example:
        >>> attachments, security = scan_ordered_flags(
        ...     ["--attach-name", "lost", "--attach", "a.pdf", "--attach-name", "A.pdf",
        ...      "--attach", "b.txt", "--tls", "--secure"]
        ... )
        >>> [(a.path, a.filename) for a in attachments]
        [('a.pdf', 'A.pdf'), ('b.txt', None)]
        >>> security is TransportSecurity.IMPLICIT_TLS
        True
    """
    attachments: list[AttachmentRef] = []
    security: TransportSecurity | None = None
    tokens = iter(args)

    for token in tokens:
        if token == "--":
            break
        flag, sep, inline = token.partition("=")
        if flag in VALUE_FLAGS:
            value = inline if sep else next(tokens, None)
            if value is None:
                break
            if flag == "--attach":
                attachments.append(AttachmentRef(path=value))
            elif flag == "--attach-name" and attachments:
                attachments[-1] = replace(attachments[-1], filename=value)
        elif token in _SECURITY_TOGGLES:
            security = _SECURITY_TOGGLES[token]

    return tuple(attachments), security


def build_raw_invocation(params: Mapping[str, Any], args: Sequence[str]) -> RawInvocation:
    """Assemble the :class:`RawInvocation` for one run.

    Args:
        params: Values Click parsed for the command's options.
        args: The raw argument list the command was invoked with.
    """
    attachments, security = scan_ordered_flags(args)
    priority = params.get("priority")
    return RawInvocation(
        to=tuple(params.get("to") or ()),
        cc=tuple(params.get("cc") or ()),
        bcc=tuple(params.get("bcc") or ()),
        subject=params.get("subject"),
        text=params.get("text"),
        html=params.get("html"),
        from_address=params.get("from_address"),
        reply_to=params.get("reply_to"),
        host=params.get("host"),
        port=params.get("port"),
        user=params.get("user"),
        password=params.get("password"),
        attachments=attachments,
        security=security,
        priority=Priority(priority) if priority else None,
        account=params.get("account"),
        config_path=params.get("config_path"),
    )


__all__ = [
    "RAW_ARGS_META_KEY",
    "VALUE_FLAGS",
    "OrderedArgsCommand",
    "build_raw_invocation",
    "scan_ordered_flags",
]
