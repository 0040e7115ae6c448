"""Health connectors: abstraction layer over the platform health-data broker."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class HealthConnectorError(Exception):
    """Raised when a health connector call fails."""


@runtime_checkable
class HealthConnector(Protocol):
    """Abstract interface for permissioned health record access.

    The session calls these methods without knowing whether records come from
    an on-device broker, an exported file, or mock generators. Records are
    returned as plain dicts and passed through untouched.
    """

    async def initialize(self) -> bool:
        """Prepare the connector; False when the platform is unavailable."""
        ...

    async def request_permission(
        self, permissions: list[dict[str, str]]
    ) -> list[dict[str, str]]:
        """Request ``{"accessType", "recordType"}`` entries; return those granted."""
        ...

    async def read_records(
        self, record_type: str, options: dict[str, Any]
    ) -> dict[str, Any]:
        """Read records for one type.

        ``options`` carries ``{"timeRangeFilter": {"operator", "startTime",
        "endTime"}}``. The response is ``{"records": [...]}``.
        """
        ...

    @property
    def data_source(self) -> str:
        """Label for the active connector: 'mock' or 'export'."""
        ...


def require_time_range(options: dict[str, Any]) -> dict[str, Any]:
    """Return ``options["timeRangeFilter"]``; every read must be bounded."""
    time_range = options.get("timeRangeFilter") if isinstance(options, dict) else None
    if not isinstance(time_range, dict) or not time_range:
        raise HealthConnectorError("read_records requires a timeRangeFilter")
    return time_range
