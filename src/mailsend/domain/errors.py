"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Sequence


class ConfigError(Exception):
    """Missing, malformed, or inconsistent configuration.

    Raised when a named account does not exist in the account document, when
    the document cannot be parsed, or when an environment default has an
    unusable value. Caught at the CLI boundary and shown as a single line.

    Example:
        >>> from mailsend.domain.errors import ConfigError
        >>> err = ConfigError("Account 'ghost' not found in config file")
        >>> str(err)
        "Account 'ghost' not found in config file"
    """


class MessageValidationError(ValueError):
    """The resolved configuration is not safe to dispatch.

    Carries every problem found by the validator so the caller can present
    the complete list in one pass.

    Example:
        >>> err = MessageValidationError(["Subject (--subject) is required"])
        >>> err.problems
        ('Subject (--subject) is required',)
        >>> str(err)
        'Subject (--subject) is required'
    """

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems: tuple[str, ...] = tuple(problems)
        super().__init__("; ".join(self.problems))


class TransportError(Exception):
    """SMTP connection, authentication, or delivery failed.

    Example:
        >>> err = TransportError("SMTP connection failed: Connection refused")
        >>> str(err)
        'SMTP connection failed: Connection refused'
    """


__all__ = [
    "ConfigError",
    "MessageValidationError",
    "TransportError",
]
