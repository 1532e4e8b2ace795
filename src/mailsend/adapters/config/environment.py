"""Capture ``EMAIL_*`` environment variables as explicit transport defaults.

The environment is read once, here, and handed to the resolver as an
:class:`~mailsend.domain.models.EnvironmentDefaults` value.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from mailsend.domain.errors import ConfigError
from mailsend.domain.models import EnvironmentDefaults

ENV_HOST = "EMAIL_HOST"
ENV_PORT = "EMAIL_PORT"
ENV_USER = "EMAIL_USER"
ENV_PASS = "EMAIL_PASS"
ENV_FROM = "EMAIL_FROM"


def _get(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key)
    if value is None or not value.strip():
        return None
    return value


def _parse_port(raw: str | None) -> int | None:
    """Parse ``EMAIL_PORT``.

    Raises:
        ConfigError: When the value is not a port number.

    Example:
        >>> _parse_port(" 2525 ")
        2525
        >>> _parse_port(None) is None
        True
    """
    if raw is None:
        return None
    try:
        port = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{ENV_PORT} must be a port number, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"{ENV_PORT} must be between 1 and 65535, got {port}")
    return port


def read_environment_defaults(environ: Mapping[str, str] | None = None) -> EnvironmentDefaults:
    """Return transport defaults from ``environ`` (``os.environ`` when None).

    Empty variables count as unset.

    Raises:
        ConfigError: When ``EMAIL_PORT`` is set but not a valid port.

    Example:
        >>> env = read_environment_defaults({"EMAIL_HOST": "smtp.example.com", "EMAIL_USER": ""})
        >>> env.host, env.user, env.port
        ('smtp.example.com', None, None)
    """
    source = os.environ if environ is None else environ
    return EnvironmentDefaults(
        host=_get(source, ENV_HOST),
        port=_parse_port(_get(source, ENV_PORT)),
        user=_get(source, ENV_USER),
        password=_get(source, ENV_PASS),
        from_address=_get(source, ENV_FROM),
    )


__all__ = [
    "ENV_FROM",
    "ENV_HOST",
    "ENV_PASS",
    "ENV_PORT",
    "ENV_USER",
    "read_environment_defaults",
]
