"""Public package surface exposing resolution and validation.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: option resolution and message validation
- Composition exports: Wired adapter services
"""

from __future__ import annotations

# Composition exports (wired adapters)
from .composition import build_production

# Domain exports
from .domain.errors import ConfigError, MessageValidationError, TransportError
from .domain.resolver import resolve
from .domain.validator import ensure_valid, validate

__all__ = [
    "ConfigError",
    "MessageValidationError",
    "TransportError",
    "build_production",
    "ensure_valid",
    "resolve",
    "validate",
]
