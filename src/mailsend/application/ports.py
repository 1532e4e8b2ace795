"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches
the corresponding adapter function. Module-level adapter functions satisfy
these protocols via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``TransportSettings``) are imported under ``TYPE_CHECKING`` only so the
    layer boundaries hold at runtime.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.models import ConfigDocument, DeliveryReceipt, EnvironmentDefaults, ResolvedConfig

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import TransportSettings


class GetConfig(Protocol):
    """Load layered application configuration."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class LoadAccountDocument(Protocol):
    """Load the YAML account document, or None when the file is absent."""

    def __call__(self, path: str | Path) -> ConfigDocument | None: ...


class GetDefaultAccountDocumentPath(Protocol):
    """Return the account document location used without ``--config``."""

    def __call__(self) -> Path: ...


class ReadEnvironmentDefaults(Protocol):
    """Capture transport defaults from the process environment."""

    def __call__(self, environ: Mapping[str, str] | None = ...) -> EnvironmentDefaults: ...


class SendMessage(Protocol):
    """Verify an SMTP session and transmit the configured message once."""

    def __call__(
        self,
        config: ResolvedConfig,
        *,
        settings: TransportSettings | None = ...,
        on_verified: Callable[[], None] | None = ...,
    ) -> DeliveryReceipt: ...


class CheckAddress(Protocol):
    """Return True when an address is syntactically valid."""

    def __call__(self, address: str) -> bool: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CheckAddress",
    "GetConfig",
    "GetDefaultAccountDocumentPath",
    "InitLogging",
    "LoadAccountDocument",
    "ReadEnvironmentDefaults",
    "SendMessage",
]
