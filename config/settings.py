"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── GitHub OAuth App ────────────────────────────────────────────────
    github_client_id: str = ""          # OAuth App client ID
    github_client_secret: str = ""      # OAuth App client secret

    # ── Connector HTTP ───────────────────────────────────────────────────
    connector_request_timeout: float = 10.0   # seconds, per outbound request

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


config = Settings()
