"""Unit list models (``cmd=list`` response items)."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from pyalarms.ingestion.normalize import normalize_epoch_seconds, safe_str
from pyalarms.models._base import AlarmsBaseModel


class SensorReading(AlarmsBaseModel):
    """One entry of a unit's ``sensors_status`` list.

    Parameters
    ----------
    name : str
        Sensor name, matched against the watched categories.
    value : str
        Human-readable sensor value (``hum_value``).
    change_ts : int or None
        Epoch seconds of the last value change. ``None`` when absent,
        unparseable or non-positive.
    """

    name: str = ""
    value: str = Field(default="", alias="hum_value")
    change_ts: int | None = None

    @field_validator("name", "value", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return safe_str(value) or ""

    @field_validator("change_ts", mode="before")
    @classmethod
    def _coerce_change_ts(cls, value: Any) -> int | None:
        return normalize_epoch_seconds(value)


class RawUnit(AlarmsBaseModel):
    """A tracked vehicle as reported by the unit list endpoint.

    Parameters
    ----------
    agent_id : int, str or None
        Backend identifier of the tracker (``agentid``).
    vehicle_number : str or None
        Registration plate (``vehiclenumber``); ``None`` when empty.
    sensors : tuple[SensorReading, ...]
        Sensor readings (``sensors_status``), in payload order.
    """

    agent_id: int | str | None = Field(default=None, alias="agentid")
    vehicle_number: str | None = Field(default=None, alias="vehiclenumber")
    sensors: tuple[SensorReading, ...] = Field(default=(), alias="sensors_status")

    @field_validator("vehicle_number", mode="before")
    @classmethod
    def _coerce_vehicle_number(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("sensors", mode="before")
    @classmethod
    def _keep_sensor_objects(cls, value: Any) -> Any:
        # Non-list payloads and non-object entries carry no readings.
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(item for item in value if isinstance(item, (dict, SensorReading)))
