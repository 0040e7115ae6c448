"""MCP Prompts: pre-built interaction templates for the Health Connect screen."""

from __future__ import annotations

from fastmcp import FastMCP


def register_health_prompts(mcp: FastMCP) -> None:
    """Register Health Connect MCP prompts."""

    @mcp.prompt()
    def daily_metrics_prompt() -> str:
        """Prompt template for reviewing the last 24 hours of health metrics."""
        return """Show me my health metrics from the last 24 hours. Please:

1. Request Health Connect permissions (request_permissions)
2. Fetch my health data (fetch_health_data)
3. Show the records grouped by type (get_health_view)
4. Point out any record types that came back empty

Just report what the records say. Don't diagnose anything."""
