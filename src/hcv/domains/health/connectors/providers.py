"""Concrete HealthConnector implementations."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable

from hcv.domains.health.connectors import HealthConnectorError, require_time_range
from hcv.domains.health.connectors.mock_data import get_mock_records
from hcv.domains.health.domain_logic.record_models import (
    parse_iso_timestamp,
    record_in_range,
)

logger = logging.getLogger(__name__)


class MockHealthConnector:
    """Uses mock record generators. Always available unless told otherwise.

    The knobs let tests and demos reproduce the broker's failure modes::

        connector = MockHealthConnector(failing_types={"HeartRate"})
        await connector.read_records("HeartRate", options)  # raises
    """

    def __init__(
        self,
        *,
        supported: bool = True,
        granted_types: Iterable[str] | None = None,
        failing_types: Iterable[str] = (),
        empty_types: Iterable[str] = (),
    ) -> None:
        self._supported = supported
        self._granted_types = set(granted_types) if granted_types is not None else None
        self._failing_types = set(failing_types)
        self._empty_types = set(empty_types)
        self.initialized = False
        self.permission_calls: list[list[dict[str, str]]] = []
        self.read_calls: list[tuple[str, dict[str, Any]]] = []

    async def initialize(self) -> bool:
        self.initialized = self._supported
        return self._supported

    async def request_permission(
        self, permissions: list[dict[str, str]]
    ) -> list[dict[str, str]]:
        self.permission_calls.append(list(permissions))
        if self._granted_types is None:
            return list(permissions)
        return [p for p in permissions if p.get("recordType") in self._granted_types]

    async def read_records(
        self, record_type: str, options: dict[str, Any]
    ) -> dict[str, Any]:
        self.read_calls.append((record_type, options))
        if record_type in self._failing_types:
            logger.debug("Simulating read failure for %s", record_type)
            raise HealthConnectorError(f"Mock read failure for {record_type}")
        if record_type in self._empty_types:
            return {"records": []}

        time_range = require_time_range(options)
        end_raw = time_range.get("endTime")
        end = parse_iso_timestamp(end_raw) if end_raw else datetime.now(timezone.utc)
        records = [
            r for r in get_mock_records(record_type, end) if record_in_range(r, time_range)
        ]
        return {"records": records}

    @property
    def data_source(self) -> str:
        return "mock"
