"""
Default config / timeout providers backed by :class:`Settings`.

Each call builds a fresh ``Settings`` so credentials rotated in the
environment (or ``.env``) are picked up without a restart.
"""

from __future__ import annotations

from typing import Dict

from config.settings import Settings
from connectors.errors import ConnectorError, ConnectorErrorCode


async def get_connector_config(connector_id: str) -> Dict[str, str]:
    """Return ``{clientId, clientSecret}`` for a connector id."""
    settings = Settings()
    if connector_id == "github":
        return {
            "clientId": settings.github_client_id,
            "clientSecret": settings.github_client_secret,
        }
    raise ConnectorError(
        ConnectorErrorCode.NOT_FOUND,
        f"No configuration source for connector '{connector_id}'",
    )


async def get_request_timeout() -> float:
    return Settings().connector_request_timeout
