"""Rows and projections handed to the host views."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pyalarms.models.alarm import AlarmFact


class SummaryRow(BaseModel):
    """One row of the summary view, keyed by sensor name."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    count: int = 0


class Projection(BaseModel):
    """Detail view contents for the selected category."""

    model_config = ConfigDict(frozen=True)

    category: str
    label: str
    title: str
    vehicles: tuple[AlarmFact, ...] = ()
