"""Fold one cycle's alarm facts into an aggregate."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyalarms.models.alarm import Aggregate, AlarmFact, CategorySummary
from pyalarms.registry import CategoryRegistry

_logger = logging.getLogger(__name__)


def build_aggregate(registry: CategoryRegistry, facts: Iterable[AlarmFact]) -> Aggregate:
    """Build a complete aggregate from *facts*.

    Every registry category gets an entry, even with no matching facts.
    Facts keep the order they were produced in; no re-sorting. Facts for
    categories outside the registry are ignored.
    """
    vehicles: dict[str, list[AlarmFact]] = {name: [] for name in registry.names()}
    for fact in facts:
        bucket = vehicles.get(fact.category)
        if bucket is None:
            _logger.debug("Ignoring fact for unwatched category %r", fact.category)
            continue
        bucket.append(fact)
    return Aggregate(categories={name: CategorySummary.of(items) for name, items in vehicles.items()})
