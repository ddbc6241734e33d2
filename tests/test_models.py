"""Tests for payload models and alarm snapshots."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pyalarms.config import AlarmsConfig
from pyalarms.models.alarm import Aggregate, AlarmFact, CategorySummary
from pyalarms.models.unit import RawUnit, SensorReading
from pyalarms.registry import CategoryRegistry


def _fact(plate: str = "A001", ts: int | None = 1_700_000_000_000) -> AlarmFact:
    return AlarmFact(category="EXT ТС в движении", agent_id=1, vehicle_number=plate, value="вкл.", timestamp=ts)


# ------------------------------------------------------------------
# SensorReading / RawUnit
# ------------------------------------------------------------------


class TestSensorReading:
    def test_parses_wire_names(self) -> None:
        reading = SensorReading.model_validate({"name": "EXT X", "hum_value": "вкл.", "change_ts": "1700000000"})

        assert reading.name == "EXT X"
        assert reading.value == "вкл."
        assert reading.change_ts == 1_700_000_000
        assert reading.raw["hum_value"] == "вкл."

    @pytest.mark.parametrize("change_ts", [None, "", "abc", "0", -5])
    def test_missing_or_bad_change_ts_is_none(self, change_ts: object) -> None:
        reading = SensorReading.model_validate({"name": "EXT X", "hum_value": "вкл.", "change_ts": change_ts})
        assert reading.change_ts is None

    def test_missing_fields_default_to_empty(self) -> None:
        reading = SensorReading.model_validate({"name": None})
        assert reading.name == ""
        assert reading.value == ""


class TestRawUnit:
    def test_parses_unit(self) -> None:
        unit = RawUnit.model_validate(
            {
                "agentid": 1,
                "vehiclenumber": "A001",
                "sensors_status": [{"name": "EXT X", "hum_value": "вкл."}],
                "extra": "ignored",
            }
        )

        assert unit.agent_id == 1
        assert unit.vehicle_number == "A001"
        assert len(unit.sensors) == 1
        assert unit.raw["extra"] == "ignored"

    def test_missing_plate_and_sensors(self) -> None:
        unit = RawUnit.model_validate({"agentid": "77", "vehiclenumber": "", "sensors_status": None})

        assert unit.agent_id == "77"
        assert unit.vehicle_number is None
        assert unit.sensors == ()

    def test_non_object_sensor_entries_skipped(self) -> None:
        unit = RawUnit.model_validate({"agentid": 1, "sensors_status": [None, "x", {"name": "EXT X"}]})
        assert [s.name for s in unit.sensors] == ["EXT X"]

    def test_non_list_sensors_treated_as_empty(self) -> None:
        unit = RawUnit.model_validate({"agentid": 1, "sensors_status": {"name": "EXT X"}})
        assert unit.sensors == ()


# ------------------------------------------------------------------
# AlarmFact / CategorySummary / Aggregate
# ------------------------------------------------------------------


class TestAlarmFact:
    def test_row_uses_wire_names(self) -> None:
        assert _fact().as_row() == {
            "agentid": 1,
            "vehiclenumber": "A001",
            "value": "вкл.",
            "timestamp": 1_700_000_000_000,
        }

    def test_event_time(self) -> None:
        assert _fact().event_time == datetime.fromtimestamp(1_700_000_000, tz=UTC)
        assert _fact(ts=None).event_time is None

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            _fact().value = "выкл."  # type: ignore[misc]


class TestCategorySummary:
    def test_count_must_match_vehicles(self) -> None:
        with pytest.raises(ValidationError):
            CategorySummary(active_count=2, vehicles=(_fact(),))

    def test_of_derives_count(self) -> None:
        summary = CategorySummary.of([_fact("A"), _fact("B")])
        assert summary.active_count == 2
        assert [f.vehicle_number for f in summary.vehicles] == ["A", "B"]


class TestAggregate:
    def test_empty_has_every_category(self) -> None:
        registry = CategoryRegistry.from_config(AlarmsConfig())
        aggregate = Aggregate.empty(registry)

        assert aggregate.names() == registry.names()
        assert all(aggregate.count(name) == 0 for name in registry.names())

    def test_accessors_for_unknown_category(self) -> None:
        aggregate = Aggregate()
        assert "X" not in aggregate
        assert aggregate.get("X") is None
        assert aggregate.count("X") == 0
        assert aggregate.vehicles("X") == ()

    def test_as_dict(self) -> None:
        aggregate = Aggregate(categories={"EXT ТС в движении": CategorySummary.of([_fact()])})
        assert aggregate.as_dict() == {
            "EXT ТС в движении": {
                "count": 1,
                "vehicles": [{"agentid": 1, "vehiclenumber": "A001", "value": "вкл.", "timestamp": 1_700_000_000_000}],
            }
        }
