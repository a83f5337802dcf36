"""
connectors — social sign-in connectors for the host identity platform.

Provides a generic connector framework that handles:
  • Config validation against each provider's schema
  • OAuth2 authorization-URL generation
  • Code → access token exchange
  • Normalized user profile lookup

Each provider (GitHub, …) is a subclass of SocialConnector.
"""
