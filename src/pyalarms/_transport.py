"""Authenticated HTTP transport for the telemetry endpoint."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyalarms._constants import USER_AGENT
from pyalarms._redact import redact_for_log
from pyalarms.config import AlarmsConfig
from pyalarms.exceptions import (
    AlarmsMalformedResponseError,
    AlarmsTransportError,
    AlarmsUnauthorizedError,
)

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can GET a telemetry endpoint and decode its JSON body.

    :class:`HttpTransport` is the aiohttp implementation.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        ...


def build_authorization(login: str, password: str) -> str:
    """``Basic base64(login:password)`` header value."""
    token = base64.b64encode(f"{login}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


class HttpTransport:
    """HTTP transport that attaches Basic credentials to every request.

    Responses are never cached; each call is a fresh live read.
    """

    def __init__(self, config: AlarmsConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._authorization = build_authorization(config.login, config.password)

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        """GET *endpoint* and return the decoded JSON body."""
        headers: dict[str, str] = {
            "accept": "application/json",
            "authorization": self._authorization,
            "cache-control": "no-cache",
            "user-agent": USER_AGENT,
        }
        url = f"{self._config.base_url}{endpoint}"

        _logger.debug("GET %s params=%s headers=%s", url, dict(params), redact_for_log(headers))

        try:
            async with self._http.get(url, params=dict(params), headers=headers) as resp:
                payload = await resp.read()
                status = resp.status
        except aiohttp.ClientError as exc:
            raise AlarmsTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise AlarmsTransportError(
                f"Request to {endpoint} timed out",
                endpoint=endpoint,
            ) from exc

        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            if 200 <= status < 300:
                raise AlarmsMalformedResponseError(
                    f"Response from {endpoint} is not valid UTF-8",
                    endpoint=endpoint,
                ) from exc
            text = payload.decode("utf-8", errors="replace")

        if status == 401:
            raise AlarmsUnauthorizedError(
                f"HTTP 401 from {endpoint}: credentials rejected",
                status_code=status,
                endpoint=endpoint,
            )
        if not 200 <= status < 300:
            raise AlarmsTransportError(
                f"HTTP {status} from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AlarmsMalformedResponseError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc

        _logger.debug("Response from %s: %s", endpoint, redact_for_log(body, max_string=128))
        return body
