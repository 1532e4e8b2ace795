"""In-memory configuration adapters for testing.

Provides configuration functions that satisfy the same Protocols as
production adapters but operate entirely in memory -- no filesystem,
no lib_layered_config discovery, no process environment.
"""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from pathlib import Path

from lib_layered_config import Config

from ...domain.models import ConfigDocument, EnvironmentDefaults


def get_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def get_default_account_document_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "mailsend" / "email-config.yml"


def load_account_document_in_memory(path: str | Path) -> ConfigDocument | None:
    """Behave as if no account document exists."""
    return None


def read_environment_defaults_in_memory(environ: Mapping[str, str] | None = None) -> EnvironmentDefaults:
    """Return empty defaults regardless of the real environment."""
    return EnvironmentDefaults()


__all__ = [
    "get_config_in_memory",
    "get_default_account_document_path_in_memory",
    "load_account_document_in_memory",
    "read_environment_defaults_in_memory",
]
