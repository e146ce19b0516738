from __future__ import annotations

"""Structured JSON logger with redaction of secrets and contact details."""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, MutableMapping

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
BEARER_RE = re.compile(r"bearer\s+[A-Za-z0-9\-_=.]+", re.IGNORECASE)
SECRET_KEYS = frozenset({"token", "secret", "password", "authorization", "api_key"})

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _scrub(value: str) -> str:
    value = EMAIL_RE.sub("[redacted]", value)
    value = BEARER_RE.sub("[redacted]", value)
    return value


def _sanitize(obj: Any) -> Any:
    if isinstance(obj, dict):
        clean: dict[str, Any] = {}
        for key, value in obj.items():
            if value is None:
                continue
            if str(key).lower() in SECRET_KEYS:
                clean[str(key)] = "[redacted]"
            else:
                clean[str(key)] = _sanitize(value)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, (int, float, bool)):
        return obj
    if obj is None:
        return None
    return _scrub(str(obj))


def _truncate(details: Mapping[str, Any] | Iterable[Any], max_bytes: int) -> Any:
    if max_bytes <= 0:
        return details
    serialized = json.dumps(details, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    blob = serialized.encode("utf-8")
    if len(blob) <= max_bytes:
        return details
    preview = blob[:max_bytes].decode("utf-8", errors="ignore")
    return {"note": "truncated", "preview": preview}


class JsonLogger:
    """Emit structured JSON events with consistent keys."""

    def __init__(
        self,
        service: str,
        *,
        logger: logging.Logger | None = None,
        enabled: bool = True,
        max_details_bytes: int = 4096,
    ) -> None:
        self._service = service
        self._logger = logger or logging.getLogger(f"datapackage.{service}.json")
        self._enabled = enabled
        self._max_details_bytes = max(0, int(max_details_bytes))

    @property
    def enabled(self) -> bool:
        return self._enabled

    def debug(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("INFO", event, fields)

    def warning(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("ERROR", event, fields)

    def emit(self, level: str, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit(level.upper(), event, dict(fields))

    def _emit(self, level: str, event: str, fields: MutableMapping[str, Any]) -> dict[str, Any] | None:
        if not self._enabled:
            return None
        numeric = _LEVEL_MAP.get(level.upper(), logging.INFO)
        if not self._logger.isEnabledFor(numeric):
            return None
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level.upper(),
            "service": self._service,
            "event": event,
        }
        for key in ("map_id", "syntax", "status"):
            value = fields.pop(key, None)
            if value is not None:
                entry[key] = value
        details = fields.pop("details", None)
        if details is not None:
            entry["details"] = _truncate(_sanitize(details), self._max_details_bytes)
        if fields:
            residual = _truncate(_sanitize(fields), self._max_details_bytes)
            if "details" in entry and isinstance(entry["details"], dict) and isinstance(residual, dict):
                entry["details"].update(residual)
            else:
                entry["details"] = residual
        payload = json.dumps(entry, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
        self._logger.log(numeric, payload)
        return entry


__all__ = ["JsonLogger"]
