"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Account document services
from ..adapters.accounts.loader import get_default_account_document_path, load_account_document

# Configuration services
from ..adapters.config.environment import read_environment_defaults
from ..adapters.config.loader import get_config

# Email services
from ..adapters.email.transport import send_message
from ..adapters.email.validation import is_valid_address

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.email import DispatchSpy
    from ..application.ports import (
        CheckAddress,
        GetConfig,
        GetDefaultAccountDocumentPath,
        InitLogging,
        LoadAccountDocument,
        ReadEnvironmentDefaults,
        SendMessage,
    )

    _assert_get_config: GetConfig = get_config
    _assert_load_account_document: LoadAccountDocument = load_account_document
    _assert_get_default_account_document_path: GetDefaultAccountDocumentPath = get_default_account_document_path
    _assert_read_environment_defaults: ReadEnvironmentDefaults = read_environment_defaults
    _assert_send_message: SendMessage = send_message
    _assert_is_valid_address: CheckAddress = is_valid_address
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    load_account_document: LoadAccountDocument
    get_default_account_document_path: GetDefaultAccountDocumentPath
    read_environment_defaults: ReadEnvironmentDefaults
    send_message: SendMessage
    is_valid_address: CheckAddress
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        load_account_document=load_account_document,
        get_default_account_document_path=get_default_account_document_path,
        read_environment_defaults=read_environment_defaults,
        send_message=send_message,
        is_valid_address=is_valid_address,
        init_logging=init_logging,
    )


def build_testing(*, spy: DispatchSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional DispatchSpy instance for capturing sends. When None,
            a fresh DispatchSpy is created. Pass your own spy to assert on
            captured configurations in tests.

    Returns:
        AppServices container with in-memory adapters. Address checks stay
        real since they perform no I/O.
    """
    from ..adapters.memory import (
        DispatchSpy,
        get_config_in_memory,
        get_default_account_document_path_in_memory,
        init_logging_in_memory,
        load_account_document_in_memory,
        read_environment_defaults_in_memory,
    )

    dispatch_spy = spy if spy is not None else DispatchSpy()

    return AppServices(
        get_config=get_config_in_memory,
        load_account_document=load_account_document_in_memory,
        get_default_account_document_path=get_default_account_document_path_in_memory,
        read_environment_defaults=read_environment_defaults_in_memory,
        send_message=dispatch_spy.send_message,
        is_valid_address=is_valid_address,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "read_environment_defaults",
    # Accounts
    "get_default_account_document_path",
    "load_account_document",
    # Email
    "is_valid_address",
    "send_message",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
