"""Immutable value objects flowing through resolve, validate and dispatch.

Contents:
    * :class:`AttachmentRef` - File path plus optional display filename.
    * :class:`RawInvocation` - Flags exactly as given on the command line.
    * :class:`EnvironmentDefaults` - Transport defaults captured from the environment.
    * :class:`AccountProfile` - Named transport settings from the account document.
    * :class:`ConfigDocument` - All account profiles plus the default account name.
    * :class:`ResolvedConfig` - The single merged configuration used for one send.
    * :class:`DeliveryReceipt` - What the dispatcher reports after a send.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType

from .enums import Priority, TransportSecurity
from .errors import ConfigError

DEFAULT_PORT = 587

#: Ordered list of problems; empty means the configuration may be dispatched.
ValidationReport = tuple[str, ...]


def _blank_to_none(value: str | None) -> str | None:
    """Treat empty and whitespace-only strings as unset.

    Example:
        >>> _blank_to_none("  ") is None
        True
        >>> _blank_to_none("smtp.example.com")
        'smtp.example.com'
    """
    if value is None or not value.strip():
        return None
    return value


def _empty_accounts() -> Mapping[str, AccountProfile]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class AttachmentRef:
    """A file to attach, optionally shown under a different name.

    Example:
        >>> AttachmentRef("./report.pdf").display_name
        'report.pdf'
        >>> AttachmentRef("./r.pdf", filename="Q3 report.pdf").display_name
        'Q3 report.pdf'
    """

    path: str
    filename: str | None = None

    @property
    def display_name(self) -> str:
        """Filename presented to the recipient."""
        if self.filename:
            return self.filename
        return self.path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


@dataclass(frozen=True, slots=True)
class RawInvocation:
    """Command-line flags before any merging.

    ``port`` is ``None`` when ``--port`` was not given, so an explicit
    ``--port 587`` can be told apart from the structural default.
    ``security`` holds the last of ``--secure`` / ``--tls`` on the command
    line, or ``None`` when neither appeared.
    """

    to: tuple[str, ...] = ()
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    subject: str | None = None
    text: str | None = None
    html: str | None = None
    from_address: str | None = None
    reply_to: str | None = None
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    attachments: tuple[AttachmentRef, ...] = ()
    security: TransportSecurity | None = None
    priority: Priority | None = None
    account: str | None = None
    config_path: str | None = None

    def __repr__(self) -> str:
        return _redacted_repr(self)


@dataclass(frozen=True, slots=True)
class EnvironmentDefaults:
    """Transport defaults read once from ``EMAIL_*`` environment variables."""

    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    from_address: str | None = None

    def __repr__(self) -> str:
        return _redacted_repr(self)


@dataclass(frozen=True, slots=True)
class AccountProfile:
    """Reusable transport settings stored under a name in the account document."""

    name: str
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    from_address: str | None = None
    reply_to: str | None = None
    secure: bool | None = None

    def __repr__(self) -> str:
        return _redacted_repr(self)


@dataclass(frozen=True, slots=True)
class ConfigDocument:
    """Named account profiles plus an optional default account name.

    Example:
        >>> doc = ConfigDocument(accounts={"work": AccountProfile(name="work", host="smtp.work.com")})
        >>> doc.get("work").host
        'smtp.work.com'
        >>> doc.get("ghost")
        Traceback (most recent call last):
        ...
        mailsend.domain.errors.ConfigError: Account 'ghost' not found in config file
    """

    accounts: Mapping[str, AccountProfile] = field(default_factory=_empty_accounts)
    default: str | None = None

    def get(self, name: str) -> AccountProfile:
        """Return the named profile or raise :class:`ConfigError`."""
        try:
            return self.accounts[name]
        except KeyError:
            raise ConfigError(f"Account '{name}' not found in config file") from None


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Fully merged transport and message settings for exactly one send.

    ``secure`` (implicit TLS) and ``starttls`` always hold opposite values.
    Blank strings are stored as ``None`` so absence is never a placeholder.
    """

    host: str | None = None
    port: int = DEFAULT_PORT
    secure: bool = False
    starttls: bool = True
    user: str | None = None
    password: str | None = None
    from_address: str | None = None
    to: tuple[str, ...] = ()
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    reply_to: str | None = None
    subject: str | None = None
    text: str | None = None
    html: str | None = None
    priority: Priority | None = None
    attachments: tuple[AttachmentRef, ...] = ()
    account: str | None = None

    def __post_init__(self) -> None:
        for name in ("host", "user", "password", "from_address", "reply_to", "subject", "text", "html"):
            object.__setattr__(self, name, _blank_to_none(getattr(self, name)))
        for name in ("to", "cc", "bcc"):
            object.__setattr__(self, name, tuple(a for a in getattr(self, name) if _blank_to_none(a)))
        if self.secure == self.starttls:
            raise ValueError("secure and starttls are mutually exclusive")

    @property
    def security(self) -> TransportSecurity:
        return TransportSecurity.from_secure_flag(self.secure)

    @property
    def primary_subtype(self) -> str:
        """``"html"`` when an HTML body exists, otherwise ``"plain"``."""
        return "html" if self.html is not None else "plain"

    @property
    def primary_body(self) -> str | None:
        return self.html if self.html is not None else self.text

    @property
    def fallback_text(self) -> str | None:
        """Plain-text alternative kept alongside an HTML primary body."""
        return self.text if self.html is not None else None

    @property
    def all_recipients(self) -> tuple[str, ...]:
        """Envelope recipients: to, then cc, then bcc."""
        return self.to + self.cc + self.bcc

    def __repr__(self) -> str:
        return _redacted_repr(self)


@dataclass(frozen=True, slots=True)
class DeliveryReceipt:
    """Outcome of a successful send.

    Attributes:
        message_id: ``Message-ID`` header of the transmitted message.
        accepted: Envelope recipients the server accepted.
        refused: Recipients the server refused, mapped to its reply.
    """

    message_id: str
    accepted: tuple[str, ...] = ()
    refused: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def _redacted_repr(obj: object) -> str:
    """Render a dataclass with its ``password`` field masked.

    Example:
        >>> "hunter2" in repr(EnvironmentDefaults(password="hunter2"))
        False
    """
    parts: list[str] = []
    for f in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, f.name)
        if f.name == "password" and value is not None:
            parts.append(f"{f.name}='[REDACTED]'")
        else:
            parts.append(f"{f.name}={value!r}")
    return f"{type(obj).__name__}({', '.join(parts)})"


__all__ = [
    "DEFAULT_PORT",
    "AccountProfile",
    "AttachmentRef",
    "ConfigDocument",
    "DeliveryReceipt",
    "EnvironmentDefaults",
    "RawInvocation",
    "ResolvedConfig",
    "ValidationReport",
]
