"""Static registry of watched alarm categories."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pyalarms.config import AlarmCategory, AlarmsConfig


class CategoryRegistry:
    """Ordered, immutable mapping of watched sensor name to display label.

    Built once from configuration at startup and shared read-only by the
    classifier, aggregator, projector and view adapter.
    """

    __slots__ = ("_categories", "_labels")

    def __init__(self, categories: Iterable[AlarmCategory]) -> None:
        items = tuple(categories)
        labels: dict[str, str] = {}
        for category in items:
            if category.sensor_name in labels:
                raise ValueError(f"duplicate category {category.sensor_name!r}")
            labels[category.sensor_name] = category.display_label
        self._categories = items
        self._labels = labels

    @classmethod
    def from_config(cls, config: AlarmsConfig) -> CategoryRegistry:
        return cls(config.categories)

    def __contains__(self, name: object) -> bool:
        return name in self._labels

    def __iter__(self) -> Iterator[AlarmCategory]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"CategoryRegistry({list(self._labels)!r})"

    def names(self) -> tuple[str, ...]:
        """Sensor names in configured order."""
        return tuple(category.sensor_name for category in self._categories)

    def label(self, name: str, default: str | None = None) -> str | None:
        """Display label for *name*, or *default* when it is not watched."""
        return self._labels.get(name, default)
