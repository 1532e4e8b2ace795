"""Configuration adapter - layered settings and environment defaults.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.settings` - Typed ``[smtp]`` and ``[accounts]`` sections
    * :mod:`.environment` - ``EMAIL_*`` environment variables as transport defaults
"""

from __future__ import annotations

from .environment import read_environment_defaults
from .loader import get_config, get_default_config_path
from .settings import (
    AccountsSettings,
    TransportSettings,
    load_accounts_settings,
    load_transport_settings,
)

__all__ = [
    "AccountsSettings",
    "TransportSettings",
    "get_config",
    "get_default_config_path",
    "load_accounts_settings",
    "load_transport_settings",
    "read_environment_defaults",
]
