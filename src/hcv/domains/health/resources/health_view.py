"""MCP Resources for the Health Connect screen."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from hcv.domains.health.domain_logic.session import HealthConnectSession


def register_health_view_resources(mcp: FastMCP, session: HealthConnectSession) -> None:
    """Register record-type discovery and the rendered view as resources."""

    @mcp.resource("healthconnect://record-types")
    def record_types_resource() -> str:
        """Record types requested and read by this screen."""
        return json.dumps(
            {
                "data_source": session.connector.data_source,
                "record_types": list(session.record_types),
            },
            indent=2,
        )

    @mcp.resource("healthconnect://view")
    def health_view_resource() -> str:
        """Current screen contents as text."""
        return session.render()
