"""Account document loader.

Reads the YAML account document with PyYAML and validates its structure
with Pydantic at the boundary, producing the immutable domain
:class:`~mailsend.domain.models.ConfigDocument`.

Document layout::

    default: work
    accounts:
      work:
        host: smtp.work.com
        port: 465
        user: w
        pass: secret
        from: w@work.com
        replyTo: team@work.com
        secure: true
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mailsend.domain.errors import ConfigError
from mailsend.domain.models import AccountProfile, ConfigDocument

logger = logging.getLogger(__name__)

ACCOUNT_DOCUMENT_NAME = "email-config.yml"


@lru_cache(maxsize=1)
def get_default_account_document_path() -> Path:
    """Return ``email-config.yml`` next to the installed package directory.

    Example:
        >>> get_default_account_document_path().name
        'email-config.yml'
    """
    package_dir = Path(__file__).resolve().parents[2]
    return package_dir.parent / ACCOUNT_DOCUMENT_NAME


class AccountEntryModel(BaseModel):
    """One entry under ``accounts`` in the document.

    Unknown keys are ignored so documents can carry notes for humans.

    Example:
        >>> entry = AccountEntryModel.model_validate({"host": "smtp.qq.com", "pass": "x", "port": "465"})
        >>> (entry.host, entry.port, entry.password)
        ('smtp.qq.com', 465, 'x')
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = Field(default=None, alias="pass")
    from_address: str | None = Field(default=None, alias="from")
    reply_to: str | None = Field(default=None, alias="replyTo")
    secure: bool | None = None

    @field_validator("host", "user", "password", "from_address", "reply_to", mode="before")
    @classmethod
    def _coerce_scalar_to_str(cls, v: Any) -> str | None:
        """Accept YAML scalars (numbers as passwords, for instance) as strings.

        Empty strings become ``None`` so they never mask lower layers.
        """
        if v is None:
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_profile(self, name: str) -> AccountProfile:
        return AccountProfile(
            name=name,
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            from_address=self.from_address,
            reply_to=self.reply_to,
            secure=self.secure,
        )


class ConfigDocumentModel(BaseModel):
    """Top-level document: ``accounts`` mapping and optional ``default``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    accounts: dict[str, AccountEntryModel] = Field(default_factory=dict)
    default: str | None = None

    @field_validator("accounts", mode="before")
    @classmethod
    def _coerce_null_accounts(cls, v: Any) -> Any:
        """An ``accounts:`` key with no entries parses as ``None``.

        Entries with an empty body are dropped so that selecting them reports
        the account as not found.
        """
        if v is None:
            return {}
        if isinstance(v, Mapping):
            return {name: entry for name, entry in v.items() if entry is not None}
        return v

    def to_document(self) -> ConfigDocument:
        profiles = {name: entry.to_profile(name) for name, entry in self.accounts.items()}
        return ConfigDocument(accounts=MappingProxyType(profiles), default=self.default or None)


def parse_account_document(data: Any) -> ConfigDocument:
    """Validate already-parsed YAML data into a :class:`ConfigDocument`.

    An empty document (``None``) is treated as one with no accounts.

    Raises:
        ConfigError: When the data does not have the expected structure.

    Example:
        >>> doc = parse_account_document({"accounts": {"work": {"host": "smtp.work.com"}}, "default": "work"})
        >>> doc.default, doc.get("work").host
        ('work', 'smtp.work.com')
    """
    if data is None:
        return ConfigDocument()
    if not isinstance(data, Mapping):
        raise ConfigError("Failed to load config file: top level must be a mapping")
    try:
        return ConfigDocumentModel.model_validate(data).to_document()
    except ValidationError as exc:
        raise ConfigError(f"Failed to load config file: {exc}") from exc


def load_account_document(path: str | Path) -> ConfigDocument | None:
    """Load the account document at ``path``.

    A missing file means "no accounts configured" and is not an error.

    Args:
        path: Location of the YAML document.

    Returns:
        The parsed document, or ``None`` when the file does not exist.

    Raises:
        ConfigError: When the file exists but cannot be read or parsed.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Account document not found", extra={"path": str(file_path)})
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to load config file: {exc}") from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to load config file: {exc}") from exc

    document = parse_account_document(data)
    logger.debug(
        "Loaded account document",
        extra={"path": str(file_path), "accounts": sorted(document.accounts), "default": document.default},
    )
    return document


__all__ = [
    "ACCOUNT_DOCUMENT_NAME",
    "AccountEntryModel",
    "ConfigDocumentModel",
    "get_default_account_document_path",
    "load_account_document",
    "parse_account_document",
]
