"""Alarm facts and the per-category aggregate built from them."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pyalarms.models._base import parse_epoch_millis

if TYPE_CHECKING:
    from pyalarms.registry import CategoryRegistry


class AlarmFact(BaseModel):
    """A sensor reading that currently triggers its watched category.

    Produced fresh on every cycle and never compared with earlier cycles.

    Parameters
    ----------
    category : str
        Watched sensor name.
    agent_id : int, str or None
        Tracker identifier of the unit.
    vehicle_number : str
        Registration plate, or the configured placeholder.
    value : str
        Raw sensor value that matched.
    timestamp : int or None
        Event time in epoch milliseconds; ``None`` when the unit did not
        report one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: str
    agent_id: int | str | None = Field(default=None, alias="agentid")
    vehicle_number: str = Field(alias="vehiclenumber")
    value: str
    timestamp: int | None = None

    @property
    def event_time(self) -> datetime | None:
        """Event time as an aware UTC datetime."""
        return parse_epoch_millis(self.timestamp)

    def as_row(self) -> dict[str, Any]:
        """Detail row in the wire naming used by the host views."""
        return {
            "agentid": self.agent_id,
            "vehiclenumber": self.vehicle_number,
            "value": self.value,
            "timestamp": self.timestamp,
        }


class CategorySummary(BaseModel):
    """Active count and affected vehicles of one category.

    ``active_count`` always equals ``len(vehicles)``; construction fails
    otherwise.
    """

    model_config = ConfigDict(frozen=True)

    active_count: int = Field(default=0, ge=0)
    vehicles: tuple[AlarmFact, ...] = ()

    @model_validator(mode="after")
    def _check_count(self) -> CategorySummary:
        if self.active_count != len(self.vehicles):
            raise ValueError(f"active_count={self.active_count} does not match {len(self.vehicles)} vehicles")
        return self

    @classmethod
    def of(cls, vehicles: Iterable[AlarmFact]) -> CategorySummary:
        items = tuple(vehicles)
        return cls(active_count=len(items), vehicles=items)


class Aggregate(BaseModel):
    """Snapshot of every watched category for one cycle.

    Instances are immutable and replaced wholesale; observers never see a
    partially updated map.
    """

    model_config = ConfigDict(frozen=True)

    categories: dict[str, CategorySummary] = Field(default_factory=dict)

    @classmethod
    def empty(cls, registry: CategoryRegistry) -> Aggregate:
        return cls(categories={name: CategorySummary() for name in registry.names()})

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def names(self) -> tuple[str, ...]:
        return tuple(self.categories)

    def get(self, category: str) -> CategorySummary | None:
        return self.categories.get(category)

    def count(self, category: str) -> int:
        summary = self.categories.get(category)
        return summary.active_count if summary is not None else 0

    def vehicles(self, category: str) -> tuple[AlarmFact, ...]:
        summary = self.categories.get(category)
        return summary.vehicles if summary is not None else ()

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Plain ``{category: {"count": n, "vehicles": [rows]}}`` mapping."""
        return {
            name: {
                "count": summary.active_count,
                "vehicles": [fact.as_row() for fact in summary.vehicles],
            }
            for name, summary in self.categories.items()
        }
