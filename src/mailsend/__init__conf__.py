"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so that ``--version`` reports
the installed distribution without importing ``importlib.metadata`` at CLI
startup.
"""

from __future__ import annotations

name = "mailsend"
title = "Send a single email over SMTP with attachments and named accounts"
version = "1.0.0"
homepage = "https://github.com/mailsend/mailsend"
author = "mailsend contributors"
author_email = "mailsend@example.com"
shell_command = "mailsend"

#: Vendor, application and slug identifiers used by lib_layered_config to
#: locate platform-specific configuration directories.
LAYEREDCONF_VENDOR = "mailsend"
LAYEREDCONF_APP = "mailsend"
LAYEREDCONF_SLUG = "mailsend"


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "shell_command",
    "title",
    "version",
]
