"""Health Connect JSON export parser.

Reads record dumps produced by a Health Connect export on the phone (or a
companion sync app) and groups them by record type. Two layouts are accepted::

    {"records": {"Steps": [{...}, ...], "HeartRate": [...]}}
    {"records": [{"recordType": "Steps", ...}, {"recordType": "Weight", ...}]}

A bare top-level ``{"Steps": [...], ...}`` mapping is treated like the first
layout. Records are kept exactly as exported; only non-object entries are
dropped.
"""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any

from hcv.domains.health.connectors import HealthConnectorError
from hcv.domains.health.domain_logic.record_models import record_in_range

logger = logging.getLogger(__name__)


class HealthConnectExportError(HealthConnectorError):
    """Raised when a Health Connect export cannot be read or has the wrong shape."""


def _group_flat_records(entries: list[Any]) -> dict[str, list[dict]]:
    grouped: dict[str, list[dict]] = defaultdict(list)
    skipped = 0
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("recordType"), str):
            skipped += 1
            continue
        record = {k: v for k, v in entry.items() if k != "recordType"}
        grouped[entry["recordType"]].append(record)
    if skipped:
        logger.warning("Skipped %d export entries without a recordType", skipped)
    return dict(grouped)


def _clean_mapping(mapping: dict[str, Any]) -> dict[str, list[dict]]:
    out: dict[str, list[dict]] = {}
    for record_type, entries in mapping.items():
        if not isinstance(entries, list):
            raise HealthConnectExportError(
                f"Records for {record_type!r} must be a list, got {type(entries).__name__}"
            )
        records = [r for r in entries if isinstance(r, dict)]
        if len(records) != len(entries):
            logger.warning(
                "Dropped %d non-object %s entries from export",
                len(entries) - len(records),
                record_type,
            )
        out[record_type] = records
    return out


def parse_health_connect_export(export_path: str | Path) -> dict[str, list[dict]]:
    """Parse an export file into ``{record_type: [records]}``.

    Raises:
        HealthConnectExportError: File missing, not JSON, or of an unknown layout.
    """
    path = Path(export_path).expanduser()
    if not path.is_file():
        raise HealthConnectExportError(f"Export file not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise HealthConnectExportError(f"Failed to read export {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise HealthConnectExportError("Export root must be a JSON object")

    body = payload.get("records", payload)
    if isinstance(body, list):
        parsed = _group_flat_records(body)
    elif isinstance(body, dict):
        parsed = _clean_mapping(body)
    else:
        raise HealthConnectExportError("'records' must be an object or a list")

    logger.info(
        "Parsed Health Connect export %s: %d record types, %d records",
        path,
        len(parsed),
        sum(len(v) for v in parsed.values()),
    )
    return parsed


def filter_records(records: list[dict], time_range: dict[str, Any]) -> list[dict]:
    """Records whose anchor timestamp matches ``time_range``, in export order."""
    return [r for r in records if record_in_range(r, time_range)]
