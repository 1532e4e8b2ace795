"""Address syntax checks backed by btx_lib_mail."""

from __future__ import annotations

import pytest

from mailsend.adapters.email.validation import is_valid_address


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "address",
    ["user@test.com", "first.last@sub.example.com", "Team Lead <lead@example.com>"],
)
def test_valid_addresses_are_accepted(address: str) -> None:
    """Plain and display-name forms pass."""
    assert is_valid_address(address) is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize("address", ["invalid", "", "@example.com", "user@"])
def test_invalid_addresses_are_rejected(address: str) -> None:
    """Malformed addresses fail."""
    assert is_valid_address(address) is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "address",
    ["ops@localhost", "root@[127.0.0.1]", "admin@[IPv6:::1]", '"a b"@x.com', "Relay <ops@mailhub>"],
)
def test_relay_style_addresses_are_accepted(address: str) -> None:
    """Single-label hosts, address literals and quoted local parts pass."""
    assert is_valid_address(address) is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize("address", ["ops@-bad-", "root@[not-an-ip]"])
def test_broken_addr_specs_are_still_rejected(address: str) -> None:
    """Malformed host labels and bogus address literals fail."""
    assert is_valid_address(address) is False
