"""Client configuration for pyalarms."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyalarms._constants import (
    ACTIVE_VALUE,
    BASE_URL,
    DEFAULT_CATEGORIES,
    DEFAULT_NODE,
    DEFAULT_POLL_INTERVAL,
    DETAIL_TITLE_FORMAT,
    MISSING_PLATE_LABEL,
)
from pyalarms.exceptions import AlarmsConfigError
from pyalarms.state.policy import ResponseOrdering


@dataclasses.dataclass(frozen=True)
class AlarmCategory:
    """A watched sensor name and the label shown to the operator."""

    sensor_name: str
    display_label: str


def _default_categories() -> tuple[AlarmCategory, ...]:
    return tuple(AlarmCategory(name, label) for name, label in DEFAULT_CATEGORIES)


def parse_categories(value: str) -> tuple[AlarmCategory, ...]:
    """Parse ``"sensor=label;sensor=label"`` into categories.

    A pair without ``=`` uses the sensor name as its label.
    """
    categories: list[AlarmCategory] = []
    for chunk in value.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, sep, label = chunk.partition("=")
        name = name.strip()
        label = label.strip() if sep else name
        if not name:
            raise ValueError(f"category entry {chunk!r} has no sensor name")
        categories.append(AlarmCategory(name, label or name))
    return tuple(categories)


@dataclasses.dataclass(frozen=True)
class AlarmsConfig:
    """Monitor configuration.

    Parameters
    ----------
    login : str
        Account login used for HTTP Basic authentication.
    password : str
        Account password.
    base_url : str
        Telemetry endpoint origin.
    node : int
        Node selected by the unit list query.
    poll_interval : float
        Seconds between scheduled fetch cycles.
    active_value : str
        Sensor value that marks a watched category as active.
    missing_plate_label : str
        Vehicle number shown for units that report none.
    detail_title_format : str
        Detail view title; ``{label}`` is replaced by the category label.
    categories : tuple[AlarmCategory, ...]
        Watched sensors in summary order. Loaded once, never reloaded.
    response_ordering : ResponseOrdering
        How responses of overlapping cycles are published.
    """

    login: str = ""
    password: str = ""
    base_url: str = BASE_URL
    node: int = DEFAULT_NODE
    poll_interval: float = DEFAULT_POLL_INTERVAL
    active_value: str = ACTIVE_VALUE
    missing_plate_label: str = MISSING_PLATE_LABEL
    detail_title_format: str = DETAIL_TITLE_FORMAT
    categories: tuple[AlarmCategory, ...] = dataclasses.field(default_factory=_default_categories)
    response_ordering: ResponseOrdering = ResponseOrdering.LAST_ARRIVAL

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        if not self.categories:
            raise ValueError("at least one alarm category is required")
        names = [category.sensor_name for category in self.categories]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate sensor names in categories: {names}")

    @property
    def has_credentials(self) -> bool:
        return bool(self.login) and bool(self.password)

    def require_credentials(self) -> None:
        """Raise :class:`AlarmsConfigError` unless login and password are set."""
        missing = [name for name in ("login", "password") if not getattr(self, name)]
        if missing:
            raise AlarmsConfigError(f"Missing credentials: {', '.join(missing)}")

    @classmethod
    def from_env(cls, **overrides: Any) -> AlarmsConfig:
        """Create configuration from environment variables.

        Reads ``ALARMS_LOGIN``, ``ALARMS_PASSWORD`` and the optional
        ``ALARMS_*`` variables below. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ALARMS_LOGIN": "login",
            "ALARMS_PASSWORD": "password",
            "ALARMS_BASE_URL": "base_url",
            "ALARMS_ACTIVE_VALUE": "active_value",
            "ALARMS_MISSING_PLATE_LABEL": "missing_plate_label",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        node_env = env.get("ALARMS_NODE")
        if node_env is not None and "node" not in overrides:
            config_kwargs["node"] = int(node_env)

        interval_env = env.get("ALARMS_POLL_INTERVAL")
        if interval_env is not None and "poll_interval" not in overrides:
            config_kwargs["poll_interval"] = float(interval_env)

        categories_env = env.get("ALARMS_CATEGORIES")
        if categories_env and "categories" not in overrides:
            config_kwargs["categories"] = parse_categories(categories_env)

        ordering_env = env.get("ALARMS_RESPONSE_ORDERING")
        if ordering_env and "response_ordering" not in overrides:
            config_kwargs["response_ordering"] = ResponseOrdering(ordering_env.strip().lower())

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
