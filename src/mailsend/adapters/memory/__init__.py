"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration, account and environment adapters
    * :mod:`.email` - In-memory dispatcher (DispatchSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    get_config_in_memory,
    get_default_account_document_path_in_memory,
    load_account_document_in_memory,
    read_environment_defaults_in_memory,
)
from .email import DispatchSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from mailsend.application.ports import (
        GetConfig,
        GetDefaultAccountDocumentPath,
        InitLogging,
        LoadAccountDocument,
        ReadEnvironmentDefaults,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_account_document_path: GetDefaultAccountDocumentPath = (
        get_default_account_document_path_in_memory
    )
    _assert_load_account_document: LoadAccountDocument = load_account_document_in_memory
    _assert_read_environment_defaults: ReadEnvironmentDefaults = read_environment_defaults_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "DispatchSpy",
    "get_config_in_memory",
    "get_default_account_document_path_in_memory",
    "init_logging_in_memory",
    "load_account_document_in_memory",
    "read_environment_defaults_in_memory",
]
