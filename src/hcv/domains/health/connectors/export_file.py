"""Export-backed health connector: reads records from a Health Connect JSON export.

Useful off-device: export the phone's Health Connect data, point
``HEALTH_CONNECT_EXPORT_PATH`` at the file, and the viewer behaves as if it were
talking to the broker.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from hcv.domains.health.connectors import require_time_range
from hcv.domains.health.connectors.export_parser import (
    HealthConnectExportError,
    filter_records,
    parse_health_connect_export,
)

logger = logging.getLogger(__name__)


class ExportFileHealthConnector:
    """HealthConnector backed by a Health Connect JSON export.

    Usage::

        connector = ExportFileHealthConnector("/path/to/health_connect.json")
        if await connector.initialize():
            response = await connector.read_records("Steps", options)
    """

    def __init__(self, export_path: str) -> None:
        self._export_path = export_path
        self._cache: dict[str, list[dict]] | None = None

    async def initialize(self) -> bool:
        """True when the export exists and parses."""
        if not self._export_path or not Path(self._export_path).expanduser().exists():
            return False
        try:
            self._load()
        except HealthConnectExportError:
            logger.exception("Failed to parse Health Connect export")
            return False
        return True

    async def request_permission(
        self, permissions: list[dict[str, str]]
    ) -> list[dict[str, str]]:
        """Grant read access for record types present in the export."""
        available = self._load()
        return [
            p for p in permissions
            if p.get("accessType") == "read" and p.get("recordType") in available
        ]

    async def read_records(
        self, record_type: str, options: dict[str, Any]
    ) -> dict[str, Any]:
        time_range = require_time_range(options)
        records = self._load().get(record_type, [])
        return {"records": filter_records(records, time_range)}

    @property
    def data_source(self) -> str:
        return "export"

    @property
    def export_path(self) -> str:
        return self._export_path

    def _load(self) -> dict[str, list[dict]]:
        """Parse the export once and cache it."""
        if self._cache is None:
            self._cache = parse_health_connect_export(self._export_path)
        return self._cache
