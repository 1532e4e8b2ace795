"""Typed views of the ``[smtp]`` and ``[accounts]`` configuration sections.

Parsed with Pydantic at the boundary so the rest of the application works
with validated, immutable values instead of raw dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from mailsend.domain.errors import ConfigError


class TransportSettings(BaseModel):
    """Settings for the SMTP session itself.

    Example:
        >>> TransportSettings().timeout
        30.0
        >>> TransportSettings(timeout=0)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: ...
    """

    model_config = ConfigDict(frozen=True)

    timeout: float = 30.0

    @field_validator("timeout")
    @classmethod
    def _timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got {v}")
        return v


class AccountsSettings(BaseModel):
    """Where to look for the account document when ``--config`` is absent."""

    model_config = ConfigDict(frozen=True)

    config_file: Path | None = None

    @field_validator("config_file", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _section(config_dict: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section: Any = config_dict.get(name, {})
    return section if isinstance(section, Mapping) else {}


def load_transport_settings(config_dict: Mapping[str, Any]) -> TransportSettings:
    """Build :class:`TransportSettings` from the ``[smtp]`` section.

    Raises:
        ConfigError: When the section holds invalid values.

    Example:
        >>> load_transport_settings({"smtp": {"timeout": 5}}).timeout
        5.0
    """
    try:
        return TransportSettings.model_validate(dict(_section(config_dict, "smtp")))
    except ValidationError as exc:
        raise ConfigError(f"Invalid [smtp] configuration: {exc}") from exc


def load_accounts_settings(config_dict: Mapping[str, Any]) -> AccountsSettings:
    """Build :class:`AccountsSettings` from the ``[accounts]`` section.

    Example:
        >>> load_accounts_settings({"accounts": {"config_file": ""}}).config_file is None
        True
    """
    try:
        return AccountsSettings.model_validate(dict(_section(config_dict, "accounts")))
    except ValidationError as exc:
        raise ConfigError(f"Invalid [accounts] configuration: {exc}") from exc


__all__ = [
    "AccountsSettings",
    "TransportSettings",
    "load_accounts_settings",
    "load_transport_settings",
]
