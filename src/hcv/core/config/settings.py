"""Application settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Health Connect viewer server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default: the server exposes personal health records and has
    # no auth layer. Opt into `0.0.0.0` explicitly when you intend remote access.
    hcv_host: str = "127.0.0.1"
    hcv_port: int = 8001
    hcv_log_level: str = "info"
    # Binding to a non-loopback host is refused unless this is set true.
    hcv_allow_insecure_bind: bool = False

    # Connectors
    health_connector: Literal["mock", "export"] = "mock"
    health_connect_export_path: str = ""


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
