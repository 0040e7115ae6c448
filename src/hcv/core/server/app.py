"""Health Connect viewer MCP server: application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from hcv.core.config.settings import Settings, get_settings
from hcv.domains.health.connectors import HealthConnector
from hcv.domains.health.connectors.export_file import ExportFileHealthConnector
from hcv.domains.health.connectors.providers import MockHealthConnector
from hcv.domains.health.domain_logic.session import HealthConnectSession
from hcv.domains.health.prompts.health_prompts import register_health_prompts
from hcv.domains.health.resources.health_view import register_health_view_resources
from hcv.domains.health.tools.health_connect_tools import register_health_connect_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "Health Connect Viewer"
SERVER_VERSION = "0.1.0"


def build_connector(settings: Settings) -> HealthConnector:
    """Pick the health connector named by ``HEALTH_CONNECTOR``."""
    if settings.health_connector == "export":
        if settings.health_connect_export_path:
            logger.info(
                "Using Health Connect export connector: %s",
                settings.health_connect_export_path,
            )
            return ExportFileHealthConnector(settings.health_connect_export_path)
        logger.warning(
            "HEALTH_CONNECTOR=export but HEALTH_CONNECT_EXPORT_PATH is empty; "
            "falling back to mock connector"
        )
    logger.info("Using mock health connector")
    return MockHealthConnector()


def create_app(
    *,
    health_connector_override: HealthConnector | None = None,
    session_override: HealthConnectSession | None = None,
) -> FastMCP:
    """Create and configure the Health Connect viewer MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Initializes the health connector (mock or export-backed)
    3. Creates the screen session (status line + fetched records)
    4. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    # --- Server instance ---
    server = FastMCP(
        SERVER_NAME,
        instructions=(
            "Single-screen Health Connect viewer. Call request_permissions first, "
            "then fetch_health_data to load the last 24 hours of records across "
            "15 metric types, and get_health_view to read them grouped by type."
        ),
    )

    # --- Initialize session and connector ---
    if session_override is not None:
        session = session_override
    else:
        if health_connector_override is not None:
            connector = health_connector_override
        else:
            connector = build_connector(settings)
        session = HealthConnectSession(connector)

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": SERVER_NAME,
            "version": SERVER_VERSION,
            "data_source": session.connector.data_source,
            "screen_status": session.status,
        }

    register_health_connect_tools(server, session)
    logger.info("Health Connect tools registered")

    # --- Register resources ---
    register_health_view_resources(server, session)

    # --- Register prompts ---
    register_health_prompts(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
