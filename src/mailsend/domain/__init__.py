"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects and the two pure services (resolve, validate)
that decide what gets sent before any transport is involved.

Contents:
    * :mod:`.models` - Immutable value objects (RawInvocation, ResolvedConfig, ...)
    * :mod:`.resolver` - Per-field precedence merge
    * :mod:`.validator` - Ordered, non-short-circuiting checks
    * :mod:`.enums` - Domain enumerations (Priority, TransportSecurity)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import Priority, TransportSecurity
from .errors import ConfigError, MessageValidationError, TransportError
from .models import (
    DEFAULT_PORT,
    AccountProfile,
    AttachmentRef,
    ConfigDocument,
    DeliveryReceipt,
    EnvironmentDefaults,
    RawInvocation,
    ResolvedConfig,
    ValidationReport,
)
from .resolver import resolve, select_account
from .validator import ensure_valid, validate

__all__ = [
    # Models
    "DEFAULT_PORT",
    "AccountProfile",
    "AttachmentRef",
    "ConfigDocument",
    "DeliveryReceipt",
    "EnvironmentDefaults",
    "RawInvocation",
    "ResolvedConfig",
    "ValidationReport",
    # Services
    "ensure_valid",
    "resolve",
    "select_account",
    "validate",
    # Enums
    "Priority",
    "TransportSecurity",
    # Errors
    "ConfigError",
    "MessageValidationError",
    "TransportError",
]
