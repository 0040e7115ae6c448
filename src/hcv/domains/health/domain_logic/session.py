"""Permission-then-fetch workflow over a HealthConnector.

A ``HealthConnectSession`` owns the two pieces of screen state (the status line
and the fetched records) and the two stage handlers that mutate them.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from hcv.domains.health.connectors import HealthConnector

from hcv.domains.health.domain_logic.record_models import (
    RECORD_TYPES,
    STATUS_DATA_FETCHED,
    STATUS_FETCH_ERROR,
    STATUS_FETCHING,
    STATUS_IDLE,
    STATUS_INITIALIZING,
    STATUS_NOT_SUPPORTED,
    STATUS_PERMISSIONS_ERROR,
    STATUS_PERMISSIONS_GRANTED,
    STATUS_REQUESTING,
    build_permission_requests,
    trailing_window,
)
from hcv.domains.health.domain_logic.rendering import render_health_view

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HealthConnectSession:
    """Screen state plus the Request Permissions / Fetch Health Data handlers.

    Both handlers run under one lock, so a second press while a stage is in
    flight waits for the first to finish rather than racing on the state.

    Usage::

        session = HealthConnectSession(MockHealthConnector())
        await session.request_health_permissions()
        await session.fetch_health_data()
        print(session.render())
    """

    def __init__(
        self,
        connector: HealthConnector,
        *,
        record_types: tuple[str, ...] = RECORD_TYPES,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._connector = connector
        self._record_types = record_types
        self._clock = clock
        self._lock = asyncio.Lock()
        self.status: str = STATUS_IDLE
        self.health_data: dict[str, list[dict[str, Any]]] = {}
        self.granted_permissions: list[Any] = []

    @property
    def connector(self) -> HealthConnector:
        return self._connector

    @property
    def record_types(self) -> tuple[str, ...]:
        return self._record_types

    async def request_health_permissions(self) -> None:
        """Initialise the connector and request read access for every record type."""
        async with self._lock:
            try:
                self.status = STATUS_INITIALIZING
                if not await self._connector.initialize():
                    self.status = STATUS_NOT_SUPPORTED
                    return

                permissions = [p.as_dict() for p in build_permission_requests(self._record_types)]

                self.status = STATUS_REQUESTING
                granted = await self._connector.request_permission(permissions)
                self.granted_permissions = list(granted or [])
                logger.info("Granted permissions: %s", self.granted_permissions)

                self.status = STATUS_PERMISSIONS_GRANTED
            except Exception:
                logger.exception("Error requesting Health Connect permissions")
                self.status = STATUS_PERMISSIONS_ERROR

    async def fetch_health_data(self) -> None:
        """Read the trailing 24 hours for every record type, one type at a time.

        A type whose read fails is logged and left out; the rest still load.
        The fetched map replaces the previous one wholesale.
        """
        async with self._lock:
            try:
                self.status = STATUS_FETCHING
                options = trailing_window(self._clock()).as_read_options()

                fetched: dict[str, list[dict[str, Any]]] = {}
                for record_type in self._record_types:
                    try:
                        response = await self._connector.read_records(record_type, options)
                        records = response["records"]
                        if len(records) > 0:
                            fetched[record_type] = list(records)
                            logger.debug("%s records: %s", record_type, records)
                    except Exception as exc:
                        logger.warning("Failed to read %s: %s", record_type, exc)

                self.health_data = fetched
                self.status = STATUS_DATA_FETCHED
            except Exception:
                logger.exception("Error fetching Health Connect data")
                self.status = STATUS_FETCH_ERROR

    def record_counts(self) -> dict[str, int]:
        return {rt: len(records) for rt, records in self.health_data.items()}

    def render(self) -> str:
        return render_health_view(self.status, self.health_data)
