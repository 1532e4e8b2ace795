"""Type-safe domain enums for message priority and transport security."""

from __future__ import annotations

from enum import Enum


class Priority(str, Enum):
    """Message priority levels accepted by ``--priority``.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> Priority.HIGH.value
        'high'
        >>> Priority("low") == "low"
        True
    """

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class TransportSecurity(str, Enum):
    """How the SMTP session is encrypted.

    Attributes:
        IMPLICIT_TLS: Encrypted from the first byte (``--secure``, usually port 465).
        STARTTLS: Plaintext connection upgraded before login (``--tls``, usually port 587).

    Example:
        >>> TransportSecurity.STARTTLS.value
        'starttls'
        >>> TransportSecurity.from_secure_flag(True) is TransportSecurity.IMPLICIT_TLS
        True
    """

    IMPLICIT_TLS = "implicit_tls"
    STARTTLS = "starttls"

    @classmethod
    def from_secure_flag(cls, secure: bool) -> TransportSecurity:
        """Map an account profile's ``secure`` boolean onto a security mode."""
        return cls.IMPLICIT_TLS if secure else cls.STARTTLS


__all__ = [
    "Priority",
    "TransportSecurity",
]
