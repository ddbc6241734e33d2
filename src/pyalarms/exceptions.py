"""Custom exception hierarchy for pyalarms."""

from __future__ import annotations


class AlarmsError(Exception):
    """Base exception for all pyalarms errors."""


class AlarmsConfigError(AlarmsError):
    """Invalid or missing configuration (e.g. no credentials)."""


class AlarmsHostUnavailableError(AlarmsError):
    """Summary or detail view was not supplied when the monitor started."""


class AlarmsTransportError(AlarmsError):
    """HTTP-level failure (network error, non-2xx status)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class AlarmsUnauthorizedError(AlarmsTransportError):
    """Credentials were rejected by the telemetry endpoint (HTTP 401)."""


class AlarmsMalformedResponseError(AlarmsError):
    """Response body could not be decoded into the expected shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class AlarmsApiError(AlarmsError):
    """API reported a failure code or omitted the unit list."""

    def __init__(
        self,
        message: str,
        *,
        code: int | str | None = None,
        endpoint: str = "",
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)
