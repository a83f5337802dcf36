"""
Connector error kinds.

Only the OAuth-semantic failures get their own code.  Transport and
provider errors (``httpx.HTTPStatusError``, ``httpx.RequestError``, …)
are never wrapped and reach the caller as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ConnectorErrorCode(str, Enum):
    GENERAL = "general"
    NOT_FOUND = "not_found"
    INVALID_CONFIG = "invalid_config"
    SOCIAL_AUTH_CODE_INVALID = "social_auth_code_invalid"
    SOCIAL_ACCESS_TOKEN_INVALID = "social_access_token_invalid"


class ConnectorError(Exception):
    """Raised by connectors and their providers with a typed error code."""

    def __init__(self, code: ConnectorErrorCode, message: Optional[str] = None) -> None:
        self.code = code
        self.message = message
        super().__init__(message or code.value)

    def __repr__(self) -> str:
        return f"ConnectorError(code={self.code.value!r}, message={self.message!r})"
