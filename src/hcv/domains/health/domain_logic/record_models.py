"""Record type constants, request shapes and status strings for Health Connect."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


# ---------------------------------------------------------------------------
# Record types (read order for every fetch)
# ---------------------------------------------------------------------------

RECORD_TYPES: tuple[str, ...] = (
    "ActiveCaloriesBurned",
    "Steps",
    "HeartRate",
    "BloodPressure",
    "SleepSession",
    "Weight",
    "Height",
    "BodyTemperature",
    "OxygenSaturation",
    "BasalBodyTemperature",
    "ExerciseSession",
    "RespiratoryRate",
    "Vo2Max",
    "BodyFat",
    "BloodGlucose",
)

ACCESS_READ = "read"

# Trailing window used by every fetch
FETCH_WINDOW = timedelta(hours=24)


# ---------------------------------------------------------------------------
# Status strings shown on the status line
# ---------------------------------------------------------------------------

STATUS_IDLE = "Idle"
STATUS_INITIALIZING = "Initializing..."
STATUS_NOT_SUPPORTED = "Health Connect not supported or not installed."
STATUS_REQUESTING = "Requesting permissions..."
STATUS_PERMISSIONS_GRANTED = "Permissions granted ✅"
STATUS_PERMISSIONS_ERROR = "Error requesting permissions ❌"
STATUS_FETCHING = "Fetching data..."
STATUS_DATA_FETCHED = "Data fetched ✅"
STATUS_FETCH_ERROR = "Error fetching data ❌"


# ---------------------------------------------------------------------------
# Request types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PermissionRequest:
    """A single (access type, record type) permission entry."""

    record_type: str
    access_type: str = ACCESS_READ

    def as_dict(self) -> dict[str, str]:
        return {"accessType": self.access_type, "recordType": self.record_type}


@dataclass(frozen=True)
class TimeRangeFilter:
    """Time range passed to ``read_records``; timestamps are ISO-8601 UTC strings."""

    start_time: str
    end_time: str
    operator: str = "between"

    def as_dict(self) -> dict[str, str]:
        return {
            "operator": self.operator,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }

    def as_read_options(self) -> dict[str, Any]:
        return {"timeRangeFilter": self.as_dict()}


def to_iso_timestamp(dt: datetime) -> str:
    """Format as ``2026-10-18T08:00:00.000Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    utc = dt.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``.

    Naive timestamps are taken as UTC.
    """
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def build_permission_requests(
    record_types: tuple[str, ...] | list[str] = RECORD_TYPES,
) -> list[PermissionRequest]:
    """One read permission per record type."""
    return [PermissionRequest(record_type=rt) for rt in record_types]


def trailing_window(now: datetime, span: timedelta = FETCH_WINDOW) -> TimeRangeFilter:
    """Return the ``[now - span, now]`` filter."""
    return TimeRangeFilter(
        start_time=to_iso_timestamp(now - span),
        end_time=to_iso_timestamp(now),
    )


def record_anchor(record: dict[str, Any]) -> Any:
    """Timestamp a record is filed under: ``startTime``, else ``time``."""
    if not isinstance(record, dict):
        return None
    return record.get("startTime") or record.get("time")


def record_in_range(record: dict[str, Any], time_range: dict[str, Any]) -> bool:
    """Whether a record's anchor falls inside a ``timeRangeFilter`` dict.

    ``between`` is start-inclusive and end-exclusive, ``after`` keeps anchors at
    or after ``startTime``, ``before`` keeps anchors before ``endTime``.
    Records without a parseable anchor never match.
    """
    anchor = record_anchor(record)
    if not isinstance(anchor, str) or not anchor:
        return False
    try:
        at = parse_iso_timestamp(anchor)
    except (TypeError, ValueError):
        return False

    operator = time_range.get("operator", "between")
    start = time_range.get("startTime")
    end = time_range.get("endTime")
    if operator in ("between", "after") and not start:
        raise ValueError(f"{operator!r} filter requires startTime")
    if operator in ("between", "before") and not end:
        raise ValueError(f"{operator!r} filter requires endTime")
    if operator == "between":
        return parse_iso_timestamp(start) <= at < parse_iso_timestamp(end)
    if operator == "after":
        return at >= parse_iso_timestamp(start)
    if operator == "before":
        return at < parse_iso_timestamp(end)
    raise ValueError(f"Unsupported time range operator: {operator!r}")
