"""
ConnectorRegistry — holds the social connectors the host exposes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from config.providers import get_connector_config, get_request_timeout
from connectors.base import SocialConnector
from connectors.github import GithubConnector

logger = logging.getLogger(__name__)


class ConnectorRegistry:
    """Singleton registry for all social connectors, keyed by metadata id."""

    _instance: Optional["ConnectorRegistry"] = None

    def __new__(cls) -> "ConnectorRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._connectors = {}
            cls._instance._discovered = False
        return cls._instance

    def register(self, connector: SocialConnector) -> None:
        meta = connector.metadata
        self._connectors[meta.id] = connector
        logger.info(
            "Connector registered: %s (%s)",
            meta.name.get("en", meta.id),
            meta.id,
        )

    def discover(self) -> None:
        """Register the built-in connectors wired to the settings providers."""
        if self._discovered:
            return
        self.register(GithubConnector(get_connector_config, get_request_timeout))
        self._discovered = True

    def get(self, connector_id: str) -> Optional[SocialConnector]:
        """Get a connector by id."""
        return self._connectors.get(connector_id)

    def list_metadata(self) -> List[Dict[str, Any]]:
        """Metadata of every registered connector, without the markdown bodies."""
        return [
            c.metadata.model_dump(mode="json", exclude={"readme", "config_template"})
            for c in self._connectors.values()
        ]

    # ── reset (for tests) ──────────────────────────────────────────────

    @classmethod
    def reset(cls) -> None:
        """Destroy singleton — only useful in test teardown."""
        cls._instance = None
