"""Mock Health Connect records for development and testing.

Records mirror the shapes the Android Health Connect bridge returns and describe
a median healthy adult's last day. Every record is anchored relative to the end
of the requested window, so the same window always yields the same records.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable

from hcv.domains.health.domain_logic.record_models import to_iso_timestamp

_MOCK_ORIGIN = "com.example.mockwearable"


def _meta(record_type: str, index: int) -> dict[str, Any]:
    return {
        "id": f"mock-{record_type}-{index}",
        "dataOrigin": _MOCK_ORIGIN,
    }


def _interval(end: datetime, hours_before: float, minutes: float) -> tuple[datetime, datetime]:
    start = end - timedelta(hours=hours_before)
    return start, start + timedelta(minutes=minutes)


def _active_calories(end: datetime) -> list[dict]:
    out = []
    for i, (hours_before, kcal) in enumerate([(9.0, 212.5), (3.5, 148.0)]):
        s, e = _interval(end, hours_before, 60)
        out.append({
            "startTime": to_iso_timestamp(s),
            "endTime": to_iso_timestamp(e),
            "energy": {"inKilocalories": kcal, "inCalories": kcal * 1000},
            "metadata": _meta("ActiveCaloriesBurned", i),
        })
    return out


def _steps(end: datetime) -> list[dict]:
    out = []
    for i, (hours_before, count) in enumerate([(14.0, 2350), (8.0, 4200), (2.0, 1875)]):
        s, e = _interval(end, hours_before, 120)
        out.append({
            "startTime": to_iso_timestamp(s),
            "endTime": to_iso_timestamp(e),
            "count": count,
            "metadata": _meta("Steps", i),
        })
    return out


def _heart_rate(end: datetime) -> list[dict]:
    s, e = _interval(end, 6.0, 15)
    samples = [
        {"time": to_iso_timestamp(s + timedelta(minutes=5 * n)), "beatsPerMinute": bpm}
        for n, bpm in enumerate([66, 71, 68])
    ]
    return [{
        "startTime": to_iso_timestamp(s),
        "endTime": to_iso_timestamp(e),
        "samples": samples,
        "metadata": _meta("HeartRate", 0),
    }]


def _blood_pressure(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=12)),
        "systolic": {"inMillimetersOfMercury": 122},
        "diastolic": {"inMillimetersOfMercury": 78},
        "bodyPosition": 3,
        "measurementLocation": 3,
        "metadata": _meta("BloodPressure", 0),
    }]


def _sleep_session(end: datetime) -> list[dict]:
    s, e = _interval(end, 22.0, 7 * 60 + 20)
    return [{
        "startTime": to_iso_timestamp(s),
        "endTime": to_iso_timestamp(e),
        "title": "Night sleep",
        "metadata": _meta("SleepSession", 0),
    }]


def _weight(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=15)),
        "weight": {"inKilograms": 74.2, "inPounds": 163.58},
        "metadata": _meta("Weight", 0),
    }]


def _height(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=15)),
        "height": {"inMeters": 1.76, "inCentimeters": 176.0},
        "metadata": _meta("Height", 0),
    }]


def _body_temperature(record_type: str, celsius: float, hours_before: float) -> Callable[[datetime], list[dict]]:
    def build(end: datetime) -> list[dict]:
        return [{
            "time": to_iso_timestamp(end - timedelta(hours=hours_before)),
            "temperature": {"inCelsius": celsius, "inFahrenheit": round(celsius * 9 / 5 + 32, 2)},
            "measurementLocation": 0,
            "metadata": _meta(record_type, 0),
        }]

    return build


def _oxygen_saturation(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=20)),
        "percentage": 97.0,
        "metadata": _meta("OxygenSaturation", 0),
    }]


def _exercise_session(end: datetime) -> list[dict]:
    s, e = _interval(end, 10.0, 45)
    return [{
        "startTime": to_iso_timestamp(s),
        "endTime": to_iso_timestamp(e),
        "exerciseType": 56,
        "title": "Morning run",
        "metadata": _meta("ExerciseSession", 0),
    }]


def _respiratory_rate(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=19)),
        "rate": 14.5,
        "metadata": _meta("RespiratoryRate", 0),
    }]


def _vo2_max(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=9)),
        "vo2MillilitersPerMinuteKilogram": 42.3,
        "measurementMethod": 0,
        "metadata": _meta("Vo2Max", 0),
    }]


def _body_fat(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=15)),
        "percentage": 21.5,
        "metadata": _meta("BodyFat", 0),
    }]


def _blood_glucose(end: datetime) -> list[dict]:
    return [{
        "time": to_iso_timestamp(end - timedelta(hours=13)),
        "level": {"inMillimolesPerLiter": 5.3, "inMilligramsPerDeciliter": 95.5},
        "specimenSource": 2,
        "mealType": 1,
        "relationToMeal": 3,
        "metadata": _meta("BloodGlucose", 0),
    }]


_BUILDERS: dict[str, Callable[[datetime], list[dict]]] = {
    "ActiveCaloriesBurned": _active_calories,
    "Steps": _steps,
    "HeartRate": _heart_rate,
    "BloodPressure": _blood_pressure,
    "SleepSession": _sleep_session,
    "Weight": _weight,
    "Height": _height,
    "BodyTemperature": _body_temperature("BodyTemperature", 36.7, 18.0),
    "OxygenSaturation": _oxygen_saturation,
    "BasalBodyTemperature": _body_temperature("BasalBodyTemperature", 36.4, 16.0),
    "ExerciseSession": _exercise_session,
    "RespiratoryRate": _respiratory_rate,
    "Vo2Max": _vo2_max,
    "BodyFat": _body_fat,
    "BloodGlucose": _blood_glucose,
}


def get_mock_records(record_type: str, end: datetime) -> list[dict]:
    """Return the mock day of ``record_type`` records ending at ``end``.

    Unknown record types yield no records.
    """
    builder = _BUILDERS.get(record_type)
    if builder is None:
        return []
    return builder(end)
