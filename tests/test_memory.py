"""DispatchSpy: the in-memory stand-in for the SMTP transport."""

from __future__ import annotations

import pytest

from mailsend.adapters.memory import DispatchSpy
from mailsend.domain.errors import TransportError
from mailsend.domain.models import ResolvedConfig

_CONFIG = ResolvedConfig(to=("to@test.com",), cc=("cc@test.com",), bcc=("bcc@test.com",))


@pytest.mark.os_agnostic
def test_spy_records_config_and_accepts_every_recipient() -> None:
    """A successful send is captured and every recipient accepted."""
    spy = DispatchSpy()

    receipt = spy.send_message(_CONFIG)

    assert spy.sent == [_CONFIG]
    assert receipt.accepted == ("to@test.com", "cc@test.com", "bcc@test.com")


@pytest.mark.os_agnostic
def test_spy_calls_on_verified_once() -> None:
    """The verified callback runs before the receipt is returned."""
    spy = DispatchSpy()
    calls: list[bool] = []

    spy.send_message(_CONFIG, on_verified=lambda: calls.append(True))

    assert calls == [True]
    assert spy.verified_count == 1


@pytest.mark.os_agnostic
def test_spy_fails_after_verification() -> None:
    """raise_exception alone simulates a delivery failure."""
    spy = DispatchSpy(raise_exception=TransportError("Failed to send email: boom"))
    calls: list[bool] = []

    with pytest.raises(TransportError, match="boom"):
        spy.send_message(_CONFIG, on_verified=lambda: calls.append(True))

    assert calls == [True]


@pytest.mark.os_agnostic
def test_spy_fails_before_verification() -> None:
    """fail_before_verify simulates a connection failure."""
    spy = DispatchSpy(raise_exception=TransportError("SMTP connection failed: refused"), fail_before_verify=True)
    calls: list[bool] = []

    with pytest.raises(TransportError, match="refused"):
        spy.send_message(_CONFIG, on_verified=lambda: calls.append(True))

    assert calls == []
    assert spy.verified_count == 0


@pytest.mark.os_agnostic
def test_clear_resets_state() -> None:
    """clear() restores a fresh spy."""
    spy = DispatchSpy(raise_exception=RuntimeError("x"), fail_before_verify=True)
    spy.sent.append(_CONFIG)

    spy.clear()

    assert spy.sent == []
    assert spy.raise_exception is None
    assert spy.fail_before_verify is False
