"""In-memory email adapters for testing.

Provides a dispatcher that satisfies the same Protocol as the production
transport but performs no SMTP operations.

Contents:
    * :class:`DispatchSpy` - Captures send calls for test assertions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ...domain.models import DeliveryReceipt, ResolvedConfig
from ..config.settings import TransportSettings


def _empty_config_list() -> list[ResolvedConfig]:
    """Create an empty typed list for captured configurations."""
    return []


@dataclass
class DispatchSpy:
    """Captures dispatch operations for test assertions.

    Each test should create its own DispatchSpy instance to avoid cross-test
    pollution. :meth:`send_message` matches the ``SendMessage`` port.

    Attributes:
        sent: Configurations passed to :meth:`send_message`, in call order.
        message_id: Message-ID reported in returned receipts.
        raise_exception: When set, raised after the session would have been
            verified, simulating a delivery failure.
        fail_before_verify: When True, ``raise_exception`` is raised before
            ``on_verified`` runs, simulating a connection failure.

    Example:
        >>> spy = DispatchSpy()
        >>> receipt = spy.send_message(ResolvedConfig(to=("a@example.com",)))
        >>> receipt.accepted
        ('a@example.com',)
        >>> len(spy.sent)
        1
    """

    sent: list[ResolvedConfig] = field(default_factory=_empty_config_list)
    message_id: str = "<spy@mailsend.test>"
    raise_exception: Exception | None = None
    fail_before_verify: bool = False
    verified_count: int = 0

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.raise_exception = None
        self.fail_before_verify = False
        self.verified_count = 0

    def send_message(
        self,
        config: ResolvedConfig,
        *,
        settings: TransportSettings | None = None,
        on_verified: Callable[[], None] | None = None,
    ) -> DeliveryReceipt:
        """Record the call and return a receipt, or raise per spy state."""
        self.sent.append(config)
        if self.raise_exception is not None and self.fail_before_verify:
            raise self.raise_exception
        self.verified_count += 1
        if on_verified is not None:
            on_verified()
        if self.raise_exception is not None:
            raise self.raise_exception
        return DeliveryReceipt(message_id=self.message_id, accepted=config.all_recipients)


__all__ = ["DispatchSpy"]
