"""High-level alarm monitor wiring the fetch cycle to the host views."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from pyalarms._transport import HttpTransport, Transport
from pyalarms.client import TelemetryClient
from pyalarms.config import AlarmsConfig
from pyalarms.exceptions import (
    AlarmsApiError,
    AlarmsConfigError,
    AlarmsError,
    AlarmsHostUnavailableError,
    AlarmsMalformedResponseError,
    AlarmsTransportError,
    AlarmsUnauthorizedError,
)
from pyalarms.ingestion.classify import ActivePredicate, Classifier
from pyalarms.models.alarm import Aggregate
from pyalarms.registry import CategoryRegistry
from pyalarms.scheduler import PollingScheduler, SchedulerState
from pyalarms.state.aggregate import build_aggregate
from pyalarms.state.store import AggregateStore
from pyalarms.view_sync import DetailView, SummaryView, ViewSync

_logger = logging.getLogger(__name__)


def _log_fetch_failure(error: AlarmsError) -> None:
    if isinstance(error, AlarmsUnauthorizedError):
        _logger.warning("Telemetry request unauthorized (401), check login/password")
    elif isinstance(error, AlarmsTransportError):
        _logger.warning("Telemetry request failed, status=%s: %s", error.status_code, error)
    elif isinstance(error, AlarmsMalformedResponseError):
        _logger.warning("Telemetry response could not be parsed: %s", error)
    elif isinstance(error, AlarmsApiError):
        _logger.warning("Telemetry API returned an error or no unit list (code=%s): %s", error.code, error)
    else:
        _logger.warning("Telemetry fetch failed: %s", error)


class AlarmMonitor:
    """Polls the telemetry endpoint and keeps the alarm views in sync.

    Usage::

        async with AlarmMonitor(config, summary=summary, detail=detail) as monitor:
            await asyncio.Event().wait()

    Every cycle fetches the unit list, classifies it, rebuilds the aggregate
    and publishes it. A failed cycle is logged and leaves the previous
    aggregate and views untouched.
    """

    def __init__(
        self,
        config: AlarmsConfig,
        *,
        summary: SummaryView | None = None,
        detail: DetailView | None = None,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        predicate: ActivePredicate | None = None,
        on_aggregate: Callable[[Aggregate], None] | None = None,
    ) -> None:
        self._config = config
        self._summary = summary
        self._detail = detail
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self._on_aggregate = on_aggregate

        self._registry = CategoryRegistry.from_config(config)
        self._classifier = Classifier.from_config(config, self._registry, predicate=predicate)
        self._store = AggregateStore(ordering=config.response_ordering)
        self._scheduler = PollingScheduler(self.run_cycle, interval=config.poll_interval)
        self._sequence = itertools.count(1)
        self._client: TelemetryClient | None = None
        self._views: ViewSync | None = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> AlarmMonitor:
        await self.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.teardown()

    async def start(self) -> None:
        """Attach the views and start polling. Later calls are no-ops.

        Raises
        ------
        AlarmsConfigError
            If login or password is missing.
        AlarmsHostUnavailableError
            If the summary or detail view was not supplied.
        """
        if self._initialized:
            return

        try:
            self._config.require_credentials()
        except AlarmsConfigError as exc:
            _logger.error("Alarm monitor not started: %s", exc)
            raise
        if self._summary is None or self._detail is None:
            missing = "summary" if self._summary is None else "detail"
            _logger.error("Alarm monitor not started: %s view unavailable", missing)
            raise AlarmsHostUnavailableError(f"{missing} view unavailable")

        self._initialized = True
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        self._client = TelemetryClient(self._config, self._transport)

        self._views = ViewSync(
            self._registry,
            self._summary,
            self._detail,
            title_format=self._config.detail_title_format,
        )
        self._views.attach()
        self._scheduler.start()

    async def teardown(self) -> None:
        """Stop the timer and release the owned HTTP session."""
        self._scheduler.stop()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> AlarmsConfig:
        return self._config

    @property
    def registry(self) -> CategoryRegistry:
        return self._registry

    @property
    def aggregate(self) -> Aggregate | None:
        """The published aggregate, ``None`` before the first successful cycle."""
        return self._store.current

    @property
    def state(self) -> SchedulerState:
        return self._scheduler.state

    @property
    def selection(self) -> str | None:
        return self._views.selection if self._views is not None else None

    def select(self, category: str) -> None:
        """Select *category* as if the operator clicked its summary row."""
        self._require_views().on_category_selected(category)

    async def wait_for_cycles(self) -> None:
        """Wait for every cycle started so far to finish."""
        await self._scheduler.wait_for_cycles()

    # ------------------------------------------------------------------
    # Cycle
    # ------------------------------------------------------------------

    async def run_cycle(self) -> bool:
        """Run one fetch → classify → aggregate → publish pass.

        Returns ``True`` when a new aggregate was published.
        """
        client = self._require_client()
        sequence = next(self._sequence)

        result = await client.fetch()
        if result.error is not None:
            _log_fetch_failure(result.error)
            return False

        facts = self._classifier.classify_all(result.units)
        aggregate = build_aggregate(self._registry, facts)
        if not self._store.replace(aggregate, sequence=sequence):
            return False

        _logger.debug(
            "Cycle %d published: %s",
            sequence,
            {name: aggregate.count(name) for name in aggregate.names()},
        )
        if self._views is not None:
            self._views.on_aggregate_updated(aggregate)
        if self._on_aggregate is not None:
            try:
                self._on_aggregate(aggregate)
            except Exception:
                _logger.debug("on_aggregate callback failed", exc_info=True)
        return True

    def _require_client(self) -> TelemetryClient:
        if self._client is None:
            raise AlarmsError("Monitor not started. Use 'async with AlarmMonitor(...) as monitor:'")
        return self._client

    def _require_views(self) -> ViewSync:
        if self._views is None:
            raise AlarmsError("Monitor not started. Use 'async with AlarmMonitor(...) as monitor:'")
        return self._views
