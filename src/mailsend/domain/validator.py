"""Completeness and consistency checks run before any network activity.

Checks run in a fixed order and never short-circuit, so the caller can
show every problem at once and the output is reproducible.

Contents:
    * :func:`validate` - Collect problems for a resolved configuration.
    * :func:`ensure_valid` - Raise :class:`MessageValidationError` when problems exist.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from .errors import MessageValidationError
from .models import ResolvedConfig, ValidationReport

FileExists = Callable[[str], bool]
AddressCheck = Callable[[str], bool]


def _addresses(cfg: ResolvedConfig) -> list[str]:
    """Every address in header order: from, reply-to, to, cc, bcc."""
    singles = [a for a in (cfg.from_address, cfg.reply_to) if a is not None]
    return [*singles, *cfg.to, *cfg.cc, *cfg.bcc]


def validate(
    cfg: ResolvedConfig,
    file_exists: FileExists = os.path.exists,
    *,
    is_valid_address: AddressCheck | None = None,
) -> ValidationReport:
    """Return every problem that would make sending ``cfg`` fail.

    Args:
        cfg: Configuration produced by :func:`mailsend.domain.resolver.resolve`.
        file_exists: Predicate used for attachment paths.
        is_valid_address: Optional syntax check applied to each address that
            is present. Address checks are skipped when ``None``.

    Returns:
        Problems in check order; an empty tuple means ``cfg`` is valid.

    Example:
        >>> validate(ResolvedConfig(), lambda _p: True)[:3]
        ('At least one recipient (--to) is required', 'Subject (--subject) is required', 'Either --text or --html is required')
    """
    problems: list[str] = []

    if not cfg.to:
        problems.append("At least one recipient (--to) is required")
    if not cfg.subject:
        problems.append("Subject (--subject) is required")
    if not cfg.text and not cfg.html:
        problems.append("Either --text or --html is required")
    if not cfg.host:
        problems.append("SMTP host is required (--host or EMAIL_HOST env var)")
    if not cfg.user:
        problems.append("SMTP user is required (--user or EMAIL_USER env var)")
    if not cfg.password:
        problems.append("SMTP password is required (--pass or EMAIL_PASS env var)")
    if not cfg.from_address:
        problems.append("From address is required (--from or EMAIL_FROM env var)")

    for attachment in cfg.attachments:
        if not file_exists(attachment.path):
            problems.append(f"Attachment not found: {attachment.path}")

    if is_valid_address is not None:
        for address in _addresses(cfg):
            if not is_valid_address(address):
                problems.append(f"Invalid email address: {address}")

    return tuple(problems)


def ensure_valid(
    cfg: ResolvedConfig,
    file_exists: FileExists = os.path.exists,
    *,
    is_valid_address: AddressCheck | None = None,
) -> ResolvedConfig:
    """Return ``cfg`` unchanged when valid.

    Raises:
        MessageValidationError: Carrying the full report when any check fails.
    """
    report = validate(cfg, file_exists, is_valid_address=is_valid_address)
    if report:
        raise MessageValidationError(report)
    return cfg


__all__ = ["AddressCheck", "FileExists", "ensure_valid", "validate"]
