"""Email address syntax checks backed by btx_lib_mail.

Addresses may be given as ``Display Name <addr@example.com>``; only the
address part is checked. Mailboxes that btx_lib_mail rejects but SMTP relays
still route are accepted: single-label hosts (``ops@localhost``), address
literals (``root@[127.0.0.1]``) and quoted local parts (``"a b"@x.com``).
"""

from __future__ import annotations

import ipaddress
import re
from email.utils import parseaddr

from btx_lib_mail import validate_email_address

_DOMAIN_LABEL = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")


def _is_address_literal(domain: str) -> bool:
    if not (domain.startswith("[") and domain.endswith("]")):
        return False
    literal = domain[1:-1]
    if literal[:5].lower() == "ipv6:":
        literal = literal[5:]
    try:
        ipaddress.ip_address(literal)
    except ValueError:
        return False
    return True


def _is_routable_addr_spec(addr: str) -> bool:
    """Structural check for addresses outside btx_lib_mail's accepted form.

    Example:
        >>> _is_routable_addr_spec("ops@localhost")
        True
        >>> _is_routable_addr_spec("root@[127.0.0.1]")
        True
        >>> _is_routable_addr_spec("a b@x.com")
        False
    """
    local, _, domain = addr.rpartition("@")
    if not local or not domain:
        return False
    quoted = len(local) >= 2 and local.startswith('"') and local.endswith('"')
    if not quoted and any(ch.isspace() for ch in local):
        return False
    if _is_address_literal(domain):
        return True
    return all(_DOMAIN_LABEL.match(label) for label in domain.split("."))


def is_valid_address(address: str) -> bool:
    """Return True when ``address`` holds a usable mailbox.

    Example:
        >>> is_valid_address("valid@example.com")
        True
        >>> is_valid_address("Team Lead <lead@example.com>")
        True
        >>> is_valid_address("ops@localhost")
        True
        >>> is_valid_address("invalid")
        False
    """
    _display_name, addr = parseaddr(address)
    if not addr or "@" not in addr:
        return False
    try:
        validate_email_address(addr)
    except ValueError:
        return _is_routable_addr_spec(addr)
    return True


__all__ = ["is_valid_address"]
