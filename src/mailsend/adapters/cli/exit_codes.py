"""Exit codes for CLI outcomes.

A single :class:`ExitCode` enum keeps every exit path grep-friendly.
Validation, configuration and transport failures all exit with ``1``;
Click reports usage errors (unknown flag, missing value) with ``2``.

Signal codes (130, 141, 143) are informational constants only. The
application never exits with these values itself; ``lib_cli_exit_tools``
handles signal-to-exit-code translation.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by this application.

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.GENERAL_ERROR)
        1
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
