"""Domain enums: values accepted on the command line and security mapping."""

from __future__ import annotations

import pytest

from mailsend.domain.enums import Priority, TransportSecurity


@pytest.mark.os_agnostic
def test_priority_values_match_cli_choices() -> None:
    """The enum values are exactly what --priority accepts."""
    assert [p.value for p in Priority] == ["low", "normal", "high"]


@pytest.mark.os_agnostic
def test_priority_compares_equal_to_string() -> None:
    """str inheritance allows direct comparison with Click values."""
    assert Priority("high") == "high"


@pytest.mark.os_agnostic
def test_unknown_priority_is_rejected() -> None:
    """Values outside the set raise ValueError."""
    with pytest.raises(ValueError):
        Priority("urgent")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("secure", "expected"),
    [(True, TransportSecurity.IMPLICIT_TLS), (False, TransportSecurity.STARTTLS)],
)
def test_secure_flag_maps_to_security_mode(secure: bool, expected: TransportSecurity) -> None:
    """An account's secure boolean selects the session type."""
    assert TransportSecurity.from_secure_flag(secure) is expected
