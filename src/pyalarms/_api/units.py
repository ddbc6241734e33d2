"""Unit list endpoint: /api/api.php?cmd=list&node=N."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from pyalarms._constants import UNITS_ENDPOINT
from pyalarms._transport import Transport
from pyalarms.config import AlarmsConfig
from pyalarms.exceptions import AlarmsApiError, AlarmsMalformedResponseError
from pyalarms.models.unit import RawUnit


def build_list_params(config: AlarmsConfig) -> dict[str, str]:
    """Query selecting the configured node's unit list."""
    return {"cmd": "list", "node": str(config.node)}


def parse_units_response(response: Any, *, endpoint: str = UNITS_ENDPOINT) -> list[RawUnit]:
    """Validate a decoded ``cmd=list`` response.

    Raises
    ------
    AlarmsMalformedResponseError
        If the body is not an object or a unit does not validate.
    AlarmsApiError
        If ``code`` is not the number ``0`` or the ``list`` field is missing.
    """
    if not isinstance(response, dict):
        raise AlarmsMalformedResponseError(
            f"{endpoint} returned {type(response).__name__}, expected an object",
            endpoint=endpoint,
        )

    raw_code = response.get("code")
    if isinstance(raw_code, bool) or not isinstance(raw_code, (int, float)) or raw_code != 0:
        raise AlarmsApiError(
            f"{endpoint} failed: code={raw_code} message={response.get('message', '')}",
            code=raw_code,
            endpoint=endpoint,
        )

    items = response.get("list")
    if not isinstance(items, list):
        raise AlarmsApiError(
            f"{endpoint} response has no unit list",
            code=raw_code,
            endpoint=endpoint,
        )

    try:
        return [RawUnit.model_validate(item) for item in items]
    except ValidationError as exc:
        raise AlarmsMalformedResponseError(
            f"{endpoint} returned an invalid unit: {exc.errors()[0].get('msg', exc)}",
            endpoint=endpoint,
        ) from exc


async def fetch_units(config: AlarmsConfig, transport: Transport) -> list[RawUnit]:
    """Fetch the current unit list for the configured node."""
    response = await transport.get_json(UNITS_ENDPOINT, build_list_params(config))
    return parse_units_response(response, endpoint=UNITS_ENDPOINT)
