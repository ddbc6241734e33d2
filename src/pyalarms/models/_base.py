"""Base model for telemetry API payloads.

Every payload model inherits from :class:`AlarmsBaseModel` which provides:

* ``None`` values are dropped before validation so the field default is
  used instead.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def parse_epoch_millis(value: int | None) -> datetime | None:
    """Convert an epoch timestamp in milliseconds to a UTC datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=UTC)


class AlarmsBaseModel(BaseModel):
    """Base for telemetry API payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original API payload dict."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Drop ``null`` fields and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        original = dict(values)
        cleaned = {key: value for key, value in original.items() if value is not None}
        # Keep an explicitly passed raw= as-is.
        if "raw" not in values:
            cleaned["raw"] = original
        return cleaned
