"""Holder of the single live aggregate.

This is the only component allowed to replace the published aggregate.
"""

from __future__ import annotations

import logging

from pyalarms.models.alarm import Aggregate
from pyalarms.state.policy import ResponseOrdering, should_publish

_logger = logging.getLogger(__name__)


class AggregateStore:
    """Owns the live :class:`Aggregate`.

    Replacement swaps one reference, so readers on the event loop always see
    either the previous snapshot or the new one, never a mix.
    """

    def __init__(self, *, ordering: ResponseOrdering = ResponseOrdering.LAST_ARRIVAL) -> None:
        self._ordering = ordering
        self._current: Aggregate | None = None
        self._published_sequence: int | None = None

    @property
    def current(self) -> Aggregate | None:
        """The published aggregate, ``None`` until the first successful cycle."""
        return self._current

    @property
    def published_sequence(self) -> int | None:
        """Cycle number of the published aggregate."""
        return self._published_sequence

    @property
    def ordering(self) -> ResponseOrdering:
        return self._ordering

    def replace(self, aggregate: Aggregate, *, sequence: int | None = None) -> bool:
        """Publish *aggregate* unless the ordering policy rejects it."""
        if not should_publish(
            ordering=self._ordering,
            incoming_sequence=sequence,
            published_sequence=self._published_sequence,
        ):
            _logger.debug(
                "Dropping aggregate from cycle %s; cycle %s already published",
                sequence,
                self._published_sequence,
            )
            return False
        self._current = aggregate
        if sequence is not None:
            self._published_sequence = sequence
        return True
