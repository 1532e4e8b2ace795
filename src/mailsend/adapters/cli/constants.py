"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
    * :data:`CHECK_MARK` / :data:`CROSS_MARK` - Status line prefixes.
"""

from __future__ import annotations

from typing import Final

#: ``-h`` works as well as ``--help``.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

CHECK_MARK: Final[str] = "✓"
CROSS_MARK: Final[str] = "✗"

__all__ = [
    "CHECK_MARK",
    "CLICK_CONTEXT_SETTINGS",
    "CROSS_MARK",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
