"""Data models for audit logging."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LogEvent", "LOG_EVENT_SCHEMA"]


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Unique run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data payload.
    stage : str | None
        Current stage identifier.
    set_id : str | None
        Duplicate set identifier if the event concerns one set.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    stage: str | None = None
    set_id: str | None = None


LOG_EVENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "umidedupe log event",
    "type": "object",
    "required": ["ts", "run_id", "level", "event", "data"],
    "properties": {
        "ts": {"type": "string"},
        "run_id": {"type": "string", "minLength": 1},
        "level": {"enum": ["DEBUG", "INFO", "WARN", "ERROR"]},
        "event": {"type": "string", "minLength": 1},
        "data": {"type": "object"},
        "stage": {"type": ["string", "null"]},
        "set_id": {"type": ["string", "null"]},
    },
    "additionalProperties": False,
}
