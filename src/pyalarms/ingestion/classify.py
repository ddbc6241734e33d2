"""Sensor reading classification.

Decides which readings of a unit count as active alarms. The comparison that
defines "active" is isolated in an :data:`ActivePredicate` because the
backend's encoding of the active state is not settled; nothing downstream
looks at sensor values again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pyalarms._constants import ACTIVE_VALUE, MISSING_PLATE_LABEL
from pyalarms.config import AlarmsConfig
from pyalarms.ingestion.normalize import seconds_to_millis
from pyalarms.models.alarm import AlarmFact
from pyalarms.models.unit import RawUnit
from pyalarms.registry import CategoryRegistry

_logger = logging.getLogger(__name__)

ActivePredicate = Callable[[str], bool]


def exact_match(expected: str) -> ActivePredicate:
    """Predicate that holds when the sensor value equals *expected*."""

    def _predicate(value: str) -> bool:
        return value == expected

    return _predicate


class Classifier:
    """Extracts alarm facts from raw units.

    Parameters
    ----------
    registry
        Watched categories; readings with other names are skipped.
    predicate
        Active Predicate applied to each watched reading's value.
    missing_plate_label
        Vehicle number used when a unit reports none.
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        *,
        predicate: ActivePredicate | None = None,
        missing_plate_label: str = MISSING_PLATE_LABEL,
    ) -> None:
        self._registry = registry
        self._predicate = predicate or exact_match(ACTIVE_VALUE)
        self._missing_plate_label = missing_plate_label

    @classmethod
    def from_config(
        cls,
        config: AlarmsConfig,
        registry: CategoryRegistry | None = None,
        *,
        predicate: ActivePredicate | None = None,
    ) -> Classifier:
        return cls(
            registry or CategoryRegistry.from_config(config),
            predicate=predicate or exact_match(config.active_value),
            missing_plate_label=config.missing_plate_label,
        )

    def classify(self, unit: RawUnit) -> list[AlarmFact]:
        """Return one fact per watched reading whose value is active, in reading order."""
        vehicle_number = unit.vehicle_number or self._missing_plate_label
        facts: list[AlarmFact] = []
        for reading in unit.sensors:
            if reading.name not in self._registry:
                continue
            if not self._predicate(reading.value):
                continue
            facts.append(
                AlarmFact(
                    category=reading.name,
                    agent_id=unit.agent_id,
                    vehicle_number=vehicle_number,
                    value=reading.value,
                    timestamp=seconds_to_millis(reading.change_ts),
                )
            )
        return facts

    def classify_all(self, units: Iterable[RawUnit]) -> list[AlarmFact]:
        """Classify every unit, keeping unit order."""
        facts: list[AlarmFact] = []
        unit_count = 0
        for unit in units:
            unit_count += 1
            facts.extend(self.classify(unit))
        _logger.debug("Classified %d units into %d alarm facts", unit_count, len(facts))
        return facts
