from __future__ import annotations

from typing import Any

from pyalarms.config import AlarmsConfig
from pyalarms.ingestion.classify import Classifier, exact_match
from pyalarms.models.unit import RawUnit

MOVING = "EXT ТС в движении"
LOW_FUEL = "EXT Низкий уровень топлива"


def _unit(agentid: Any = 1, plate: str | None = "A001", **sensors: Any) -> RawUnit:
    readings = [{"name": name, **fields} for name, fields in sensors.get("readings", [])]
    return RawUnit.model_validate({"agentid": agentid, "vehiclenumber": plate, "sensors_status": readings})


def _classifier(**overrides: Any) -> Classifier:
    return Classifier.from_config(AlarmsConfig(**overrides))


def test_active_reading_becomes_fact() -> None:
    unit = _unit(readings=[(MOVING, {"hum_value": "вкл.", "change_ts": "1700000000"})])

    facts = _classifier().classify(unit)

    assert len(facts) == 1
    fact = facts[0]
    assert fact.category == MOVING
    assert fact.as_row() == {"agentid": 1, "vehiclenumber": "A001", "value": "вкл.", "timestamp": 1_700_000_000_000}


def test_inactive_reading_emits_nothing() -> None:
    unit = _unit(readings=[(MOVING, {"hum_value": "выкл.", "change_ts": "1700000000"})])
    assert _classifier().classify(unit) == []


def test_unwatched_sensor_skipped_even_when_on() -> None:
    unit = _unit(readings=[("EXT Дверь открыта", {"hum_value": "вкл."}), ("Ignition", {"hum_value": "вкл."})])
    assert _classifier().classify(unit) == []


def test_missing_plate_uses_placeholder() -> None:
    unit = _unit(plate=None, readings=[(LOW_FUEL, {"hum_value": "вкл."})])

    (fact,) = _classifier().classify(unit)

    assert fact.vehicle_number == "Без номера"


def test_missing_or_unparseable_timestamp_stays_absent() -> None:
    unit = _unit(
        readings=[
            (MOVING, {"hum_value": "вкл."}),
            (LOW_FUEL, {"hum_value": "вкл.", "change_ts": "soon"}),
        ]
    )

    facts = _classifier().classify(unit)

    assert [f.timestamp for f in facts] == [None, None]
    assert all(f.event_time is None for f in facts)


def test_facts_follow_reading_order_within_unit() -> None:
    unit = _unit(readings=[(LOW_FUEL, {"hum_value": "вкл."}), (MOVING, {"hum_value": "вкл."})])
    assert [f.category for f in _classifier().classify(unit)] == [LOW_FUEL, MOVING]


def test_classify_all_keeps_unit_order() -> None:
    units = [
        _unit(agentid=3, plate="C", readings=[(MOVING, {"hum_value": "вкл."})]),
        _unit(agentid=1, plate="A", readings=[(MOVING, {"hum_value": "выкл."})]),
        _unit(agentid=2, plate="B", readings=[(MOVING, {"hum_value": "вкл."})]),
    ]

    facts = _classifier().classify_all(units)

    assert [f.vehicle_number for f in facts] == ["C", "B"]


def test_active_value_is_configurable() -> None:
    unit = _unit(readings=[(MOVING, {"hum_value": "on"})])

    assert _classifier().classify(unit) == []
    assert len(_classifier(active_value="on").classify(unit)) == 1


def test_custom_predicate() -> None:
    config = AlarmsConfig()
    classifier = Classifier.from_config(config, predicate=lambda value: value.lower() in {"on", "вкл."})
    unit = _unit(readings=[(MOVING, {"hum_value": "ON"}), (LOW_FUEL, {"hum_value": "off"})])

    assert [f.category for f in classifier.classify(unit)] == [MOVING]


def test_exact_match_is_exact() -> None:
    predicate = exact_match("вкл.")
    assert predicate("вкл.")
    assert not predicate("вкл")
    assert not predicate(" вкл.")
    assert not predicate("")
