"""Publication policy for overlapping fetch cycles.

The scheduler does not wait for a cycle to finish before starting the next
one, so responses may arrive out of order. This module decides whether a
freshly built aggregate may replace the published one.
"""

from __future__ import annotations

from enum import StrEnum


class ResponseOrdering(StrEnum):
    #: Whatever response arrives last is published, even if its request
    #: started before the one currently shown.
    LAST_ARRIVAL = "last_arrival"
    #: A response is dropped when a cycle that started later has already
    #: been published.
    REQUEST_ORDER = "request_order"


def should_publish(
    *,
    ordering: ResponseOrdering,
    incoming_sequence: int | None,
    published_sequence: int | None,
) -> bool:
    """Decide whether an aggregate from cycle *incoming_sequence* is published.

    Policy:
    - ``LAST_ARRIVAL``: always.
    - ``REQUEST_ORDER``: only when no newer cycle was published. Missing
      sequence numbers on either side always publish.
    """
    if ordering is ResponseOrdering.LAST_ARRIVAL:
        return True
    if incoming_sequence is None or published_sequence is None:
        return True
    return incoming_sequence > published_sequence
