"""Account document adapter - named SMTP profiles stored as YAML.

Contents:
    * :func:`.loader.load_account_document` - Read and validate the document
    * :func:`.loader.get_default_account_document_path` - Location used without ``--config``
"""

from __future__ import annotations

from .loader import (
    ACCOUNT_DOCUMENT_NAME,
    get_default_account_document_path,
    load_account_document,
    parse_account_document,
)

__all__ = [
    "ACCOUNT_DOCUMENT_NAME",
    "get_default_account_document_path",
    "load_account_document",
    "parse_account_document",
]
