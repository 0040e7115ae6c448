"""Display formatting for Health Connect records.

Pure functions: same input, same string. Records are loosely shaped dicts from
the connector, so every field lookup tolerates missing or non-dict levels and
renders an absent value as an empty string.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from hcv.domains.health.domain_logic.record_models import record_anchor

HEADING = "Health Connect: All Metrics"
FALLBACK_VALUE = "Data available"
LINE_MARKER = "➤"


def _get(record: Any, *path: str) -> Any:
    """Walk ``path`` through nested dicts, returning None at the first gap."""
    current = record
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _show(value: Any) -> str:
    if value is None:
        return ""
    # 97.0 -> "97"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _field(record: Any, *path: str) -> str:
    return _show(_get(record, *path))


def _heart_rate(record: Any) -> str:
    bpm = _get(record, "beatsPerMinute")
    if bpm is None:
        samples = _get(record, "samples")
        if isinstance(samples, list) and samples:
            bpm = ", ".join(_field(s, "beatsPerMinute") for s in samples)
    return f"BPM: {_show(bpm)}"


def _temperature(record: Any) -> str:
    return f"Temp: {_field(record, 'temperature', 'inCelsius')} °C"


_FORMATTERS: dict[str, Callable[[Any], str]] = {
    "ActiveCaloriesBurned": lambda r: f"kcal: {_field(r, 'energy', 'inKilocalories')}",
    "Steps": lambda r: f"Steps: {_field(r, 'count')}",
    "HeartRate": _heart_rate,
    "BloodPressure": lambda r: (
        f"Systolic: {_field(r, 'systolic', 'inMillimetersOfMercury')} mmHg, "
        f"Diastolic: {_field(r, 'diastolic', 'inMillimetersOfMercury')} mmHg"
    ),
    "SleepSession": lambda r: f"Duration: {_field(r, 'startTime')} to {_field(r, 'endTime')}",
    "Weight": lambda r: f"Weight: {_field(r, 'weight', 'inKilograms')} kg",
    "Height": lambda r: f"Height: {_field(r, 'height', 'inMeters')} m",
    "BodyTemperature": _temperature,
    "BasalBodyTemperature": _temperature,
    "OxygenSaturation": lambda r: f"SpO₂: {_field(r, 'percentage')}%",
    "RespiratoryRate": lambda r: f"Breaths/min: {_field(r, 'rate')}",
    "Vo2Max": lambda r: f"VO₂ Max: {_field(r, 'vo2MillilitersPerMinuteKilogram')}",
    "BodyFat": lambda r: f"Body Fat %: {_field(r, 'percentage')}",
    "ExerciseSession": lambda r: (
        f"Exercise: {_field(r, 'exerciseType')} | "
        f"Duration: {_field(r, 'startTime')} to {_field(r, 'endTime')}"
    ),
    "BloodGlucose": lambda r: f"BloodGlucose: {_field(r, 'level', 'inMillimolesPerLiter')}",
}

FORMATTED_RECORD_TYPES = frozenset(_FORMATTERS)


def render_record_value(record_type: str, record: Any) -> str:
    """Format one record's value, e.g. ``Steps: 4200``.

    Unknown record types render as ``Data available``.
    """
    formatter = _FORMATTERS.get(record_type)
    if formatter is None:
        return FALLBACK_VALUE
    return formatter(record)


def format_record_line(record_type: str, record: Any) -> str:
    """``➤ {start} — {end} | {value}``; instantaneous records use ``time`` as start."""
    start = _show(record_anchor(record)) if isinstance(record, dict) else ""
    end = _field(record, "endTime")
    return f"{LINE_MARKER} {start} — {end} | {render_record_value(record_type, record)}"


def render_sections(health_data: Mapping[str, list]) -> list[dict[str, Any]]:
    """One ``{"record_type", "lines"}`` section per record type with data."""
    return [
        {
            "record_type": record_type,
            "lines": [format_record_line(record_type, r) for r in records],
        }
        for record_type, records in health_data.items()
        if records
    ]


def render_health_view(status: str, health_data: Mapping[str, list]) -> str:
    """Render the whole screen: heading, status line, then one block per type."""
    lines = [HEADING, "", f"Status: {status}"]
    for section in render_sections(health_data):
        lines.append("")
        lines.append(section["record_type"])
        lines.extend(section["lines"])
    return "\n".join(lines)
