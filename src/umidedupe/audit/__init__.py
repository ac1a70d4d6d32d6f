"""Audit logging subsystem for umidedupe.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: structured event envelope
"""

from umidedupe.audit.helpers import generate_run_id
from umidedupe.audit.logger import AuditLogger
from umidedupe.audit.models import LOG_EVENT_SCHEMA, LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "LOG_EVENT_SCHEMA",
    "generate_run_id",
]
