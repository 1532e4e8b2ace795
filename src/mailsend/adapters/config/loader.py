"""Application configuration loader with caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import Config, read_config

from mailsend import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled default configuration file.

    Example:
        >>> path = get_default_config_path()
        >>> path.name
        'defaultconfig.toml'
        >>> path.exists()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Loaded once per start_dir and cached for the process lifetime, which is
# the lifetime of a single send.
@lru_cache(maxsize=4)
def _get_config_impl(*, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, start_dir: str | None = None) -> Config:
    """Load layered application configuration.

    Sources in precedence order: defaults → app → host → user → dotenv → env.
    These settings tune the tool itself (SMTP timeout, default account
    document, logging); SMTP accounts live in the YAML account document.

    Args:
        start_dir: Optional directory that seeds .env discovery. Defaults to
            the current working directory when None.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> "timeout" in config.as_dict()["smtp"]
        True
    """
    return _get_config_impl(start_dir=start_dir)


def _cache_clear() -> None:
    """Invalidate the cached configuration so the next call re-reads disk."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is not visible once the function is cast to the
# Protocol, so it is attached explicitly.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
]
