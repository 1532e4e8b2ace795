"""Application layer - port definitions.

Contains the port protocols that define the interfaces for adapter
implementations wired by the composition root.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    CheckAddress,
    GetConfig,
    GetDefaultAccountDocumentPath,
    InitLogging,
    LoadAccountDocument,
    ReadEnvironmentDefaults,
    SendMessage,
)

__all__ = [
    "CheckAddress",
    "GetConfig",
    "GetDefaultAccountDocumentPath",
    "InitLogging",
    "LoadAccountDocument",
    "ReadEnvironmentDefaults",
    "SendMessage",
]
