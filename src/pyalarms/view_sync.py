"""Boundary between the alarm core and the host's summary/detail views."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from pyalarms._constants import DETAIL_TITLE_FORMAT
from pyalarms.models.alarm import Aggregate, AlarmFact
from pyalarms.models.view import SummaryRow
from pyalarms.projection import project
from pyalarms.registry import CategoryRegistry

_logger = logging.getLogger(__name__)


class SummaryView(Protocol):
    """Host container listing one row per category with its count."""

    def add_rows(self, rows: Sequence[SummaryRow]) -> None: ...

    def set_count(self, key: str, count: int) -> None: ...

    def on_select(self, callback: Callable[[str], None]) -> None: ...


class DetailView(Protocol):
    """Host container listing the vehicles of the selected category."""

    def replace_rows(self, rows: Sequence[AlarmFact]) -> None: ...

    def set_title(self, title: str) -> None: ...


class ViewSync:
    """Pushes aggregates to the summary view and projections to the detail view.

    Holds the view handles it was given; nothing is looked up by title.
    Owns the operator's selection, which survives refresh cycles.
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        summary: SummaryView,
        detail: DetailView,
        *,
        title_format: str = DETAIL_TITLE_FORMAT,
    ) -> None:
        self._registry = registry
        self._summary = summary
        self._detail = detail
        self._title_format = title_format
        self._selection: str | None = None
        self._aggregate: Aggregate | None = None
        self._attached = False

    @property
    def selection(self) -> str | None:
        return self._selection

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        """Add the summary rows and subscribe to selection events (once)."""
        if self._attached:
            return
        self._summary.add_rows(
            [SummaryRow(key=category.sensor_name, label=category.display_label) for category in self._registry]
        )
        self._summary.on_select(self.on_category_selected)
        self._attached = True
        _logger.info("Alarm views attached (%d categories)", len(self._registry))

    def on_aggregate_updated(self, aggregate: Aggregate) -> None:
        """Refresh counts and, if a category is selected, the detail view."""
        self._aggregate = aggregate
        for name in self._registry.names():
            self._summary.set_count(name, aggregate.count(name))
        if self._selection is not None:
            self._refresh_detail()

    def on_category_selected(self, category: str) -> None:
        """Select *category* and refresh the detail view immediately."""
        if category not in self._registry:
            _logger.debug("Selected category %r is not watched", category)
        self._selection = category
        self._refresh_detail()

    def _refresh_detail(self) -> None:
        projection = project(
            self._aggregate,
            self._selection,
            self._registry,
            title_format=self._title_format,
        )
        if projection is None:
            return
        self._detail.replace_rows(projection.vehicles)
        self._detail.set_title(projection.title)
