"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the send pipeline to the
outside world: the command line, configuration files, the environment,
SMTP servers and the logging backend.

Contents:
    * :mod:`.accounts` - YAML account document loading
    * :mod:`.config` - Layered configuration, typed settings, environment defaults
    * :mod:`.email` - Message construction and SMTP transport
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory doubles for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
