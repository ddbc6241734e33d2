"""pyalarms - Async fleet telemetry alarm monitor."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyalarms")
except PackageNotFoundError:
    __version__ = "0+local"
from pyalarms.client import FetchResult, TelemetryClient
from pyalarms.config import AlarmCategory, AlarmsConfig
from pyalarms.exceptions import (
    AlarmsApiError,
    AlarmsConfigError,
    AlarmsError,
    AlarmsHostUnavailableError,
    AlarmsMalformedResponseError,
    AlarmsTransportError,
    AlarmsUnauthorizedError,
)
from pyalarms.ingestion.classify import ActivePredicate, Classifier, exact_match
from pyalarms.models import (
    Aggregate,
    AlarmFact,
    CategorySummary,
    Projection,
    RawUnit,
    SensorReading,
    SummaryRow,
)
from pyalarms.monitor import AlarmMonitor
from pyalarms.projection import project
from pyalarms.registry import CategoryRegistry
from pyalarms.scheduler import PollingScheduler, SchedulerState
from pyalarms.state.aggregate import build_aggregate
from pyalarms.state.policy import ResponseOrdering
from pyalarms.state.store import AggregateStore
from pyalarms.view_sync import DetailView, SummaryView, ViewSync

__all__ = [
    "__version__",
    "ActivePredicate",
    "Aggregate",
    "AggregateStore",
    "AlarmCategory",
    "AlarmFact",
    "AlarmMonitor",
    "AlarmsApiError",
    "AlarmsConfig",
    "AlarmsConfigError",
    "AlarmsError",
    "AlarmsHostUnavailableError",
    "AlarmsMalformedResponseError",
    "AlarmsTransportError",
    "AlarmsUnauthorizedError",
    "CategoryRegistry",
    "CategorySummary",
    "Classifier",
    "DetailView",
    "FetchResult",
    "PollingScheduler",
    "Projection",
    "RawUnit",
    "ResponseOrdering",
    "SchedulerState",
    "SensorReading",
    "SummaryRow",
    "SummaryView",
    "TelemetryClient",
    "ViewSync",
    "build_aggregate",
    "exact_match",
    "project",
]
