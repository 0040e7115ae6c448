"""MCP tools for the Health Connect screen: the two buttons and the record view."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from hcv.domains.health.domain_logic.session import HealthConnectSession

from hcv.domains.health.domain_logic.rendering import render_sections

logger = logging.getLogger(__name__)


def register_health_connect_tools(mcp: FastMCP, session: HealthConnectSession) -> None:
    """Register the permission, fetch and view tools on the MCP server."""

    @mcp.tool
    async def request_permissions() -> str:
        """Initialize Health Connect and request read access for all 15 record types.

        Returns the resulting status line.
        """
        await session.request_health_permissions()
        return json.dumps({"status": session.status})

    @mcp.tool
    async def fetch_health_data() -> str:
        """Load the last 24 hours of records for every record type.

        Types that fail to load or have no records are left out. Returns the
        status line and the number of records per type.
        """
        await session.fetch_health_data()
        counts = session.record_counts()
        logger.info("Fetched %d record types (%s)", len(counts), session.status)
        return json.dumps({
            "status": session.status,
            "record_counts": counts,
            "total_records": sum(counts.values()),
        })

    @mcp.tool
    def get_health_view(structured: bool = False) -> str:
        """Show the screen: status line and records grouped by type.

        Args:
            structured: Return JSON sections instead of the plain-text view.
        """
        if structured:
            return json.dumps({
                "status": session.status,
                "sections": render_sections(session.health_data),
            }, ensure_ascii=False)
        return session.render()

    @mcp.tool
    def list_record_types() -> list[str]:
        """List the record types this screen requests and reads, in read order."""
        return list(session.record_types)
