"""Email adapter - MIME composition and SMTP transport.

Structure:
    * :mod:`.message` - Build the MIME message from a resolved configuration
    * :mod:`.transport` - Verify the SMTP session and transmit once
    * :mod:`.validation` - Address syntax checks via btx_lib_mail

Contents:
    * :func:`.message.build_message` - Compose headers, body parts and attachments
    * :func:`.transport.send_message` - Primary sending interface
    * :func:`.validation.is_valid_address` - Mailbox syntax predicate
"""

from __future__ import annotations

from .message import build_message
from .transport import send_message
from .validation import is_valid_address

__all__ = [
    "build_message",
    "is_valid_address",
    "send_message",
]
