"""
SocialConnector — abstract interface for all social sign-in connectors.

Every provider (GitHub, Google, …) subclasses this and implements the
four core operations.  The host treats connectors uniformly through it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol

from connectors.models import AccessTokenResult, ConnectorMetadata, UserInfo


class GetConnectorConfig(Protocol):
    """Returns the stored config for a connector id.  Called on every operation."""

    async def __call__(self, connector_id: str) -> Mapping[str, Any]:
        ...


class GetTimeout(Protocol):
    """Returns the request timeout in seconds."""

    async def __call__(self) -> float:
        ...


class SocialConnector(ABC):
    """Abstract base for all social connectors."""

    # ── Identity ────────────────────────────────────────────────────────
    @property
    @abstractmethod
    def metadata(self) -> ConnectorMetadata:
        """Static descriptor: id, display text, logo, docs."""
        ...

    # ── Configuration ──────────────────────────────────────────────────

    @abstractmethod
    async def validate_config(self, config: Any) -> None:
        """
        Check stored configuration against the connector's schema.

        Raises
        ------
        ConnectorError
            With ``ConnectorErrorCode.INVALID_CONFIG`` on any schema violation.
        """
        ...

    # ── OAuth flow ──────────────────────────────────────────────────────

    @abstractmethod
    async def get_authorization_uri(self, redirect_uri: str, state: str) -> str:
        """
        Build the provider's OAuth2 authorization URL.

        Parameters
        ----------
        redirect_uri : str
            Where the provider sends the user back to, passed through verbatim.
        state : str
            Opaque anti-CSRF string, passed through verbatim.

        Returns
        -------
        The full URL to redirect the user to.
        """
        ...

    @abstractmethod
    async def get_access_token(self, code: str) -> AccessTokenResult:
        """Exchange the authorization code for an access token."""
        ...

    @abstractmethod
    async def get_user_info(self, access_token: AccessTokenResult) -> UserInfo:
        """
        Fetch the normalized user profile for an access token.

        Fields the provider did not return are left unset on the result;
        ``UserInfo.to_dict()`` gives the profile with them omitted.
        """
        ...
