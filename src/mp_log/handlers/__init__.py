"""Handlers – log handler adapters: redaction, structlog and stdlib bridges."""
from mp_log.handlers.redaction import DEFAULT_SENSITIVE_FIELDS, RedactingHandler, SensitiveFieldsFilter
from mp_log.handlers.stdlib import ClientLogHandler
from mp_log.handlers.structlog_bridge import StructlogHandler, configure_structlog

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "ClientLogHandler",
    "RedactingHandler",
    "SensitiveFieldsFilter",
    "StructlogHandler",
    "configure_structlog",
]
