"""Shared test fixtures for Health Connect viewer tests."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HEALTH_CONNECTOR", "mock")
    monkeypatch.setenv("HEALTH_CONNECT_EXPORT_PATH", "")
    monkeypatch.setenv("HCV_HOST", "127.0.0.1")
    monkeypatch.setenv("HCV_ALLOW_INSECURE_BIND", "false")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from hcv.domains.health.connectors.providers import MockHealthConnector  # noqa: E402
from hcv.domains.health.domain_logic.session import HealthConnectSession  # noqa: E402

FIXED_NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


# ---------------------------------------------------------------------------
# Connector and session fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_now() -> datetime:
    """The pinned "now" used by session fixtures."""
    return FIXED_NOW


@pytest.fixture
def mock_connector() -> MockHealthConnector:
    """A supported mock connector that grants everything."""
    return MockHealthConnector()


@pytest.fixture
def session(mock_connector: MockHealthConnector) -> HealthConnectSession:
    """A session on the mock connector with a pinned clock."""
    return HealthConnectSession(mock_connector, clock=fixed_clock)


# ---------------------------------------------------------------------------
# Export file fixtures
# ---------------------------------------------------------------------------

SAMPLE_EXPORT = {
    "records": {
        "Steps": [
            {
                "startTime": "2026-10-18T06:00:00.000Z",
                "endTime": "2026-10-18T08:00:00.000Z",
                "count": 4200,
            },
            {
                "startTime": "2026-10-16T06:00:00.000Z",
                "endTime": "2026-10-16T08:00:00.000Z",
                "count": 9999,
            },
        ],
        "Weight": [
            {"time": "2026-10-18T07:30:00.000Z", "weight": {"inKilograms": 74.2}},
        ],
        "HeartRate": [
            {
                "startTime": "2026-10-18T09:00:00.000Z",
                "endTime": "2026-10-18T09:10:00.000Z",
                "samples": [
                    {"time": "2026-10-18T09:00:00.000Z", "beatsPerMinute": 64},
                    {"time": "2026-10-18T09:05:00.000Z", "beatsPerMinute": 70},
                ],
            },
        ],
    }
}


@pytest.fixture
def sample_export() -> dict:
    """A small export: two Steps (one stale), one Weight, one HeartRate."""
    return json.loads(json.dumps(SAMPLE_EXPORT))


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    """Write SAMPLE_EXPORT to a temp file and return its path."""
    path = tmp_path / "health_connect.json"
    path.write_text(json.dumps(SAMPLE_EXPORT), encoding="utf-8")
    return path
