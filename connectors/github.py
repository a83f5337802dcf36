"""
GithubConnector — "Sign In with GitHub" via the OAuth App web flow.

Configuration and timeout are fetched from the host on every call so
rotated credentials apply without a restart.  Only two failures get a
connector error code: a token response without ``access_token`` and a
401 from the user endpoint.  Everything else from httpx propagates.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from connectors.base import GetConnectorConfig, GetTimeout, SocialConnector
from connectors.errors import ConnectorError, ConnectorErrorCode
from connectors.models import (
    AccessTokenResult,
    ConnectorMetadata,
    ConnectorType,
    GithubConfig,
    GithubUserResponse,
    UserInfo,
)
from connectors.utils import DOCS_DIR, get_markdown_contents

logger = logging.getLogger(__name__)

# GitHub OAuth2 endpoints
AUTHORIZATION_ENDPOINT = "https://github.com/login/oauth/authorize"
ACCESS_TOKEN_ENDPOINT = "https://github.com/login/oauth/access_token"
USER_INFO_ENDPOINT = "https://api.github.com/user"
SCOPE = "read:user"

_README_FALLBACK = "Please check README.md file directory."
_CONFIG_TEMPLATE_FALLBACK = "Please check config-template.md file directory."
_LOGO = (
    "https://user-images.githubusercontent.com/5717882/"
    "156983224-7ea0296b-38fa-419d-9515-67e8a9612e09.png"
)


class GithubConnector(SocialConnector):
    """OAuth2 social connector for GitHub."""

    def __init__(
        self,
        get_config: GetConnectorConfig,
        get_request_timeout: GetTimeout,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._get_config = get_config
        self._get_request_timeout = get_request_timeout
        self._http_client = http_client
        self._metadata = ConnectorMetadata(
            id="github",
            type=ConnectorType.SOCIAL,
            name={"en": "Sign In with GitHub", "zh-CN": "GitHub登录"},
            logo=_LOGO,
            description={"en": "Sign In with GitHub", "zh-CN": "GitHub登录"},
            readme=get_markdown_contents(DOCS_DIR / "github" / "README.md", _README_FALLBACK),
            config_template=get_markdown_contents(
                DOCS_DIR / "github" / "config-template.md", _CONFIG_TEMPLATE_FALLBACK
            ),
        )

    @property
    def metadata(self) -> ConnectorMetadata:
        return self._metadata

    # ── Configuration ──────────────────────────────────────────────────

    async def validate_config(self, config: Any) -> None:
        self._parse_config(config)

    @staticmethod
    def _parse_config(config: Any) -> GithubConfig:
        try:
            return GithubConfig.model_validate(config)
        except ValidationError as exc:
            raise ConnectorError(ConnectorErrorCode.INVALID_CONFIG, str(exc)) from exc

    async def _load_config(self) -> GithubConfig:
        return self._parse_config(await self._get_config(self.metadata.id))

    # ── HTTP ────────────────────────────────────────────────────────────

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the injected client, or a throwaway one for this request."""
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient() as client:
            yield client

    # ── OAuth flow ──────────────────────────────────────────────────────

    async def get_authorization_uri(self, redirect_uri: str, state: str) -> str:
        config = await self._load_config()
        params = {
            "client_id": config.client_id,
            "redirect_uri": redirect_uri,
            "state": state,
            "scope": SCOPE,  # fixed scope set
        }
        return f"{AUTHORIZATION_ENDPOINT}?{urlencode(params)}"

    async def get_access_token(self, code: str) -> AccessTokenResult:
        """Exchange auth code for an access token.  Exactly one attempt."""
        config = await self._load_config()
        timeout = await self._get_request_timeout()

        logger.debug("Exchanging GitHub authorization code (timeout=%ss)", timeout)
        async with self._client() as client:
            resp = await client.post(
                ACCESS_TOKEN_ENDPOINT,
                json={
                    "client_id": config.client_id,
                    "client_secret": config.client_secret,
                    "code": code,
                },
                headers={"Accept": "application/json"},
                timeout=timeout,
            )
            resp.raise_for_status()
            token_data = resp.json()

        # GitHub answers 200 with an error payload for bad or reused codes
        access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
        if not access_token:
            detail = None
            if isinstance(token_data, dict):
                detail = token_data.get("error_description") or token_data.get("error")
            raise ConnectorError(ConnectorErrorCode.SOCIAL_AUTH_CODE_INVALID, detail)

        return AccessTokenResult(access_token=access_token)

    async def get_user_info(self, access_token: AccessTokenResult) -> UserInfo:
        timeout = await self._get_request_timeout()

        logger.debug("Fetching GitHub user profile (timeout=%ss)", timeout)
        try:
            async with self._client() as client:
                resp = await client.get(
                    USER_INFO_ENDPOINT,
                    headers={
                        "Authorization": f"token {access_token.access_token}",
                        "Accept": "application/vnd.github+json",
                    },
                    timeout=timeout,
                )
                resp.raise_for_status()
                user = resp.json()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 401:
                raise ConnectorError(ConnectorErrorCode.SOCIAL_ACCESS_TOKEN_INVALID) from exc
            raise

        return GithubUserResponse.model_validate(user).to_user_info()
