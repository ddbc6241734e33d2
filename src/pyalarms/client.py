"""Telemetry client returning a discriminated fetch result."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pyalarms._api.units import fetch_units
from pyalarms._transport import Transport
from pyalarms.config import AlarmsConfig
from pyalarms.exceptions import AlarmsError
from pyalarms.models.unit import RawUnit

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch: either ``units`` or a typed ``error``."""

    units: tuple[RawUnit, ...] = ()
    error: AlarmsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, units: list[RawUnit] | tuple[RawUnit, ...]) -> FetchResult:
        return cls(units=tuple(units))

    @classmethod
    def failure(cls, error: AlarmsError) -> FetchResult:
        return cls(error=error)


class TelemetryClient:
    """Issues one authenticated unit list request per call.

    There is no retry and no caching: a failed call is reported in the
    result and the next scheduled cycle is the retry.
    """

    def __init__(self, config: AlarmsConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport

    async def fetch(self) -> FetchResult:
        """Fetch the live unit list. Never raises :class:`AlarmsError`."""
        try:
            units = await fetch_units(self._config, self._transport)
        except AlarmsError as exc:
            return FetchResult.failure(exc)
        _logger.debug("Fetched %d units", len(units))
        return FetchResult.success(units)
