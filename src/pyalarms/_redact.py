"""Redaction for DEBUG logs.

Every telemetry request carries Basic credentials and a unit list response
can hold hundreds of vehicles. Values pass through :func:`redact_for_log`
before they are logged: credential-bearing keys are masked, long strings are
cut and long lists are capped.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

REDACTED = "<redacted>"

_CREDENTIAL_KEYS: frozenset[str] = frozenset({"authorization", "cookie", "login", "password", "token"})
_MAX_DEPTH = 20


def _is_credential(key: object) -> bool:
    return str(key).lower() in _CREDENTIAL_KEYS


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else f"{text[:limit]}…<truncated>"


def redact_for_log(value: Any, *, max_string: int = 512, max_items: int = 20, _depth: int = 0) -> Any:
    """Return a log-safe copy of *value*.

    Mappings are masked per key, sequences keep their first *max_items*
    entries followed by a ``"<N more>"`` marker.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _clip(value, max_string)
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    def nested(item: Any) -> Any:
        return redact_for_log(item, max_string=max_string, max_items=max_items, _depth=_depth + 1)

    if isinstance(value, Mapping):
        return {str(key): REDACTED if _is_credential(key) else nested(item) for key, item in value.items()}
    if isinstance(value, Sequence):
        head = [nested(item) for item in value[:max_items]]
        hidden = len(value) - len(head)
        return head + [f"<{hidden} more>"] if hidden > 0 else head
    return repr(value)
