"""
Connector API routes — metadata, config validation, and the OAuth steps.

Route prefix: /api/v1/connectors

ConnectorError and httpx failures are left to the app-level exception
handlers registered in ``main.create_app``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query

from connectors.base import SocialConnector
from connectors.errors import ConnectorError, ConnectorErrorCode
from connectors.registry import ConnectorRegistry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["connectors"])


def get_registry() -> ConnectorRegistry:
    return ConnectorRegistry()


def _get_connector(registry: ConnectorRegistry, connector_id: str) -> SocialConnector:
    connector = registry.get(connector_id)
    if not connector:
        raise ConnectorError(
            ConnectorErrorCode.NOT_FOUND,
            f"Connector '{connector_id}' not found",
        )
    return connector


# ── Routes ─────────────────────────────────────────────────────────────


@router.get("/providers")
async def list_providers(
    registry: ConnectorRegistry = Depends(get_registry),
) -> List[Dict[str, Any]]:
    """List all registered connectors.  Used by the sign-in page."""
    return registry.list_metadata()


@router.get("/{connector_id}/metadata")
async def get_metadata(
    connector_id: str,
    registry: ConnectorRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Full metadata including README and config template."""
    connector = _get_connector(registry, connector_id)
    return connector.metadata.model_dump(mode="json")


@router.post("/{connector_id}/validate-config")
async def validate_config(
    connector_id: str,
    payload: Any = Body(...),
    registry: ConnectorRegistry = Depends(get_registry),
) -> Dict[str, bool]:
    """Check a config object before the admin saves it."""
    connector = _get_connector(registry, connector_id)
    await connector.validate_config(payload)
    return {"valid": True}


@router.get("/{connector_id}/authorization-uri")
async def get_authorization_uri(
    connector_id: str,
    redirect_uri: str = Query(...),
    state: str = Query(...),
    registry: ConnectorRegistry = Depends(get_registry),
) -> Dict[str, str]:
    """
    Get the provider's authorization URL.

    The caller generates and keeps ``state``; it is echoed back on the
    callback for CSRF checking.
    """
    connector = _get_connector(registry, connector_id)
    uri = await connector.get_authorization_uri(redirect_uri, state)
    return {"authorization_uri": uri, "connector_id": connector_id}


@router.get("/{connector_id}/callback")
async def oauth_callback(
    connector_id: str,
    code: str = Query(...),
    registry: ConnectorRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Exchange the code and return the normalized user profile."""
    connector = _get_connector(registry, connector_id)

    # 1. Exchange code for token
    token = await connector.get_access_token(code)

    # 2. Fetch profile
    user_info = await connector.get_user_info(token)
    logger.info("Social sign-in via %s for user id %s", connector_id, user_info.id)
    return user_info.to_dict()
