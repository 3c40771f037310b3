"""Structured logging configuration using structlog.

JSON output for production, console output for development, and
redaction of the personal data that flows through fleet forms: phone
numbers, emails, license and registration numbers.
"""

import re
import sys
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

if TYPE_CHECKING:
    from fleetform.config.settings import Settings

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
    "email",
    "phone",
    "phone_number",
    "license_number",
    "registration_number",
    "employee_id",
    "address",
    "supplier_contact",
    "raw_input",
    "formatted_value",
    "previous_value",
})

# Added by earlier processors; ISO timestamps look like phone numbers
PASSTHROUGH_KEYS: frozenset[str] = frozenset({"timestamp", "level"})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"\+?[\d\s\-\(\)]{10,}")
# MH-14-AB1234, MH14AB1234
REGISTRATION_PATTERN = re.compile(r"\b[A-Z]{2}-?\d{2}-?[A-Z]{1,2}\d{4}\b")
# MH-1420110062821, MH1420110062821
LICENSE_PATTERN = re.compile(r"\b[A-Z]{2}-?\d{13}\b")


class PIIRedactor:
    """Processor that redacts PII from log events.

    Known sensitive keys are replaced wholesale; other string values are
    scanned for email, license, registration and phone patterns.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            elif key in PASSTHROUGH_KEYS:
                result[key] = value
            else:
                result[key] = self._redact_value(value)
        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._redact_dict(value)
        if isinstance(value, str):
            return self._redact_string(value)
        if isinstance(value, (list, tuple)):
            return [self._redact_value(item) for item in value]
        return value

    def _redact_string(self, value: str) -> str:
        # License before phone: 13 digits would otherwise read as a phone
        value = EMAIL_PATTERN.sub("[EMAIL]", value)
        value = LICENSE_PATTERN.sub("[LICENSE]", value)
        value = REGISTRATION_PATTERN.sub("[REGISTRATION]", value)
        value = PHONE_PATTERN.sub("[PHONE]", value)
        return value


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format - "json" for production, "console" for development
        redact_pii: Whether to redact PII from logs
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_pii:
        processors.append(PIIRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            level_map.get(level.upper(), 20)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def setup_logging_from_settings(settings: "Settings") -> None:
    """Configure logging from the observability.logging settings section."""
    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_pii=logging_config.redact_pii,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
