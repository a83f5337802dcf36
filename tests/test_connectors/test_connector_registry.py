"""
Tests for the connector registry.
"""

from unittest.mock import AsyncMock

from connectors.github import GithubConnector
from connectors.registry import ConnectorRegistry


def _github() -> GithubConnector:
    return GithubConnector(AsyncMock(), AsyncMock())


class TestConnectorRegistry:
    def setup_method(self):
        ConnectorRegistry.reset()

    def teardown_method(self):
        ConnectorRegistry.reset()

    def test_singleton(self):
        assert ConnectorRegistry() is ConnectorRegistry()

    def test_register_and_get(self):
        registry = ConnectorRegistry()
        connector = _github()
        registry.register(connector)
        assert registry.get("github") is connector

    def test_get_unknown_returns_none(self):
        assert ConnectorRegistry().get("gitlab") is None

    def test_list_metadata_omits_markdown_bodies(self):
        registry = ConnectorRegistry()
        registry.register(_github())

        [meta] = registry.list_metadata()
        assert meta["id"] == "github"
        assert meta["type"] == "Social"
        assert meta["name"]["en"] == "Sign In with GitHub"
        assert "readme" not in meta
        assert "config_template" not in meta

    def test_discover_registers_github_once(self):
        registry = ConnectorRegistry()
        registry.discover()
        first = registry.get("github")
        registry.discover()

        assert isinstance(first, GithubConnector)
        assert registry.get("github") is first
        assert len(registry.list_metadata()) == 1

    def test_reset_drops_connectors(self):
        ConnectorRegistry().register(_github())
        ConnectorRegistry.reset()
        assert ConnectorRegistry().get("github") is None
