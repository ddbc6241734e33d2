"""Data models for telemetry payloads and alarm snapshots."""

from pyalarms.models._base import AlarmsBaseModel, parse_epoch_millis
from pyalarms.models.alarm import Aggregate, AlarmFact, CategorySummary
from pyalarms.models.unit import RawUnit, SensorReading
from pyalarms.models.view import Projection, SummaryRow

__all__ = [
    "Aggregate",
    "AlarmFact",
    "AlarmsBaseModel",
    "CategorySummary",
    "Projection",
    "RawUnit",
    "SensorReading",
    "SummaryRow",
    "parse_epoch_millis",
]
