"""Derive the detail view contents from the aggregate and the selection."""

from __future__ import annotations

from pyalarms._constants import DETAIL_TITLE_FORMAT
from pyalarms.models.alarm import Aggregate
from pyalarms.models.view import Projection
from pyalarms.registry import CategoryRegistry


def project(
    aggregate: Aggregate | None,
    selection: str | None,
    registry: CategoryRegistry,
    *,
    title_format: str = DETAIL_TITLE_FORMAT,
) -> Projection | None:
    """Project the selected category's vehicles.

    Returns ``None`` when nothing is selected, meaning the detail view is
    left as it is. A selected category missing from *aggregate* (or no
    aggregate yet) projects to an empty vehicle list with its label.
    Depends only on its arguments.
    """
    if selection is None:
        return None
    label = registry.label(selection, default=selection) or selection
    vehicles = aggregate.vehicles(selection) if aggregate is not None else ()
    return Projection(
        category=selection,
        label=label,
        title=title_format.format(label=label),
        vehicles=vehicles,
    )
