"""Merge command-line flags, an account profile and environment defaults.

The resolver is a pure function of its three inputs: it reads no
environment variables and touches no files. Precedence is evaluated per
field, highest first:

1. explicit command-line flag,
2. selected account profile,
3. environment default (transport fields only),
4. structural default (port ``587`` only).

Contents:
    * :func:`select_account` - Decide which account profile, if any, applies.
    * :func:`resolve` - Build the :class:`ResolvedConfig` for one send.
"""

from __future__ import annotations

from typing import TypeVar

from .enums import TransportSecurity
from .errors import ConfigError
from .models import (
    DEFAULT_PORT,
    AccountProfile,
    ConfigDocument,
    EnvironmentDefaults,
    RawInvocation,
    ResolvedConfig,
)

_T = TypeVar("_T")


def _first(*candidates: _T | None) -> _T | None:
    """Return the first candidate that is neither ``None`` nor an empty string.

    Example:
        >>> _first(None, "", "smtp.example.com", "other")
        'smtp.example.com'
        >>> _first(None, None) is None
        True
    """
    for candidate in candidates:
        if candidate is None or candidate == "":
            continue
        return candidate
    return None


def select_account(raw: RawInvocation, doc: ConfigDocument | None) -> AccountProfile | None:
    """Return the account profile selected for this invocation.

    An account is selected when ``--account`` names one, or when no
    ``--host`` was given and the document declares a default. A selected
    name missing from the document is a hard failure, including the case
    where no document exists at all.

    Raises:
        ConfigError: When the selected account does not exist.

    Example:
        >>> doc = ConfigDocument(accounts={"work": AccountProfile(name="work")}, default="work")
        >>> select_account(RawInvocation(), doc).name
        'work'
        >>> select_account(RawInvocation(host="smtp.other.com"), doc) is None
        True
    """
    if raw.account:
        name = raw.account
    elif doc is not None and doc.default and not raw.host:
        name = doc.default
    else:
        return None
    if doc is None:
        raise ConfigError(f"Account '{name}' not found in config file")
    return doc.get(name)


def _resolve_security(raw: RawInvocation, profile: AccountProfile | None) -> TransportSecurity:
    if raw.security is not None:
        return raw.security
    if profile is not None and profile.secure is not None:
        return TransportSecurity.from_secure_flag(profile.secure)
    return TransportSecurity.STARTTLS


def resolve(
    raw: RawInvocation,
    env: EnvironmentDefaults,
    doc: ConfigDocument | None,
) -> ResolvedConfig:
    """Build the single configuration used to send the message.

    Args:
        raw: Flags as parsed from the command line.
        env: Transport defaults captured from the process environment.
        doc: Parsed account document, or ``None`` when no document exists.

    Returns:
        The merged, immutable configuration.

    Raises:
        ConfigError: When a selected account is not in the document.

    Example:
        >>> cfg = resolve(RawInvocation(to=("a@x.com",), host="h"), EnvironmentDefaults(user="u"), None)
        >>> (cfg.host, cfg.port, cfg.user, cfg.starttls, cfg.secure)
        ('h', 587, 'u', True, False)
    """
    profile = select_account(raw, doc)
    account = profile if profile is not None else AccountProfile(name="")
    security = _resolve_security(raw, profile)

    return ResolvedConfig(
        host=_first(raw.host, account.host, env.host),
        port=_first(raw.port, account.port, env.port) or DEFAULT_PORT,
        secure=security is TransportSecurity.IMPLICIT_TLS,
        starttls=security is TransportSecurity.STARTTLS,
        user=_first(raw.user, account.user, env.user),
        password=_first(raw.password, account.password, env.password),
        from_address=_first(raw.from_address, account.from_address, env.from_address),
        reply_to=_first(raw.reply_to, account.reply_to),
        to=raw.to,
        cc=raw.cc,
        bcc=raw.bcc,
        subject=raw.subject,
        text=raw.text,
        html=raw.html,
        priority=raw.priority,
        attachments=raw.attachments,
        account=profile.name if profile is not None else None,
    )


__all__ = ["resolve", "select_account"]
