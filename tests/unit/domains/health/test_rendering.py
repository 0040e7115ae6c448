"""Tests for record value formatting and the rendered screen."""

from __future__ import annotations

import pytest

from hcv.domains.health.domain_logic.record_models import RECORD_TYPES
from hcv.domains.health.domain_logic.rendering import (
    FALLBACK_VALUE,
    FORMATTED_RECORD_TYPES,
    format_record_line,
    render_health_view,
    render_record_value,
    render_sections,
)


class TestRenderRecordValue:
    @pytest.mark.parametrize(
        ("record_type", "record", "expected"),
        [
            ("ActiveCaloriesBurned", {"energy": {"inKilocalories": 212.5}}, "kcal: 212.5"),
            ("Steps", {"count": 4200}, "Steps: 4200"),
            ("HeartRate", {"beatsPerMinute": 72}, "BPM: 72"),
            (
                "BloodPressure",
                {
                    "systolic": {"inMillimetersOfMercury": 122},
                    "diastolic": {"inMillimetersOfMercury": 78},
                },
                "Systolic: 122 mmHg, Diastolic: 78 mmHg",
            ),
            (
                "SleepSession",
                {"startTime": "2026-10-17T22:00:00.000Z", "endTime": "2026-10-18T05:20:00.000Z"},
                "Duration: 2026-10-17T22:00:00.000Z to 2026-10-18T05:20:00.000Z",
            ),
            ("Weight", {"weight": {"inKilograms": 74.2}}, "Weight: 74.2 kg"),
            ("Height", {"height": {"inMeters": 1.76}}, "Height: 1.76 m"),
            ("BodyTemperature", {"temperature": {"inCelsius": 36.7}}, "Temp: 36.7 °C"),
            ("BasalBodyTemperature", {"temperature": {"inCelsius": 36.4}}, "Temp: 36.4 °C"),
            ("OxygenSaturation", {"percentage": 97}, "SpO₂: 97%"),
            ("RespiratoryRate", {"rate": 14.5}, "Breaths/min: 14.5"),
            ("Vo2Max", {"vo2MillilitersPerMinuteKilogram": 42.3}, "VO₂ Max: 42.3"),
            ("BodyFat", {"percentage": 21.5}, "Body Fat %: 21.5"),
            (
                "ExerciseSession",
                {"exerciseType": 56, "startTime": "A", "endTime": "B"},
                "Exercise: 56 | Duration: A to B",
            ),
            ("BloodGlucose", {"level": {"inMillimolesPerLiter": 5.3}}, "BloodGlucose: 5.3"),
        ],
    )
    def test_each_record_type(self, record_type, record, expected):
        assert render_record_value(record_type, record) == expected

    def test_every_record_type_has_formatter(self):
        assert set(RECORD_TYPES) == FORMATTED_RECORD_TYPES

    def test_unknown_type_falls_back(self):
        assert render_record_value("Hydration", {"volume": 1}) == FALLBACK_VALUE
        assert render_record_value("", {}) == "Data available"

    def test_missing_nested_fields_render_empty(self):
        assert render_record_value("BloodPressure", {}) == (
            "Systolic:  mmHg, Diastolic:  mmHg"
        )
        assert render_record_value("Weight", {"weight": None}) == "Weight:  kg"
        assert render_record_value("Weight", {"weight": 74}) == "Weight:  kg"

    def test_non_dict_record_does_not_raise(self):
        assert render_record_value("Steps", None) == "Steps: "
        assert render_record_value("Steps", "garbage") == "Steps: "

    def test_whole_number_floats_render_as_ints(self):
        assert render_record_value("OxygenSaturation", {"percentage": 97.0}) == "SpO₂: 97%"
        assert render_record_value("Weight", {"weight": {"inKilograms": 74.0}}) == "Weight: 74 kg"
        assert render_record_value("BodyFat", {"percentage": 21.5}) == "Body Fat %: 21.5"

    def test_heart_rate_falls_back_to_samples(self):
        record = {"samples": [{"beatsPerMinute": 64}, {"beatsPerMinute": 70}]}
        assert render_record_value("HeartRate", record) == "BPM: 64, 70"

    def test_heart_rate_top_level_wins_over_samples(self):
        record = {"beatsPerMinute": 80, "samples": [{"beatsPerMinute": 64}]}
        assert render_record_value("HeartRate", record) == "BPM: 80"

    def test_deterministic(self):
        record = {"systolic": {"inMillimetersOfMercury": 130}}
        first = render_record_value("BloodPressure", record)
        assert all(render_record_value("BloodPressure", record) == first for _ in range(5))


class TestFormatRecordLine:
    def test_interval_record(self):
        record = {"startTime": "T0", "endTime": "T1", "count": 4200}
        assert format_record_line("Steps", record) == "➤ T0 — T1 | Steps: 4200"

    def test_instant_record_uses_time_and_blank_end(self):
        record = {"time": "T0", "percentage": 97}
        assert format_record_line("OxygenSaturation", record) == "➤ T0 —  | SpO₂: 97%"


class TestRenderView:
    def test_sections_only_for_types_with_data(self):
        data = {
            "Steps": [{"startTime": "T0", "endTime": "T1", "count": 4200}],
            "Weight": [],
        }
        sections = render_sections(data)
        assert [s["record_type"] for s in sections] == ["Steps"]
        assert sections[0]["lines"] == ["➤ T0 — T1 | Steps: 4200"]

    def test_view_layout(self):
        data = {
            "Steps": [{"startTime": "T0", "endTime": "T1", "count": 4200}],
            "BodyFat": [{"time": "T2", "percentage": 21.5}],
        }
        view = render_health_view("Data fetched ✅", data)
        assert view.splitlines() == [
            "Health Connect: All Metrics",
            "",
            "Status: Data fetched ✅",
            "",
            "Steps",
            "➤ T0 — T1 | Steps: 4200",
            "",
            "BodyFat",
            "➤ T2 —  | Body Fat %: 21.5",
        ]

    def test_empty_view(self):
        view = render_health_view("Idle", {})
        assert view == "Health Connect: All Metrics\n\nStatus: Idle"
