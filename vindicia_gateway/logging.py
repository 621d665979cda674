"""
Structured logging configuration.

The library only ever calls structlog.get_logger() and logs events such as
"request_sending" or "soap_fault" with keyword fields. Applications that want
JSON lines on stdout call setup_logging() once at startup.
"""
import logging
import sys
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from vindicia_gateway.config import GatewaySettings, get_settings

EventDict = Dict[str, Any]

# event fields that may carry credentials or card data
SENSITIVE_FIELDS = frozenset({"password", "cvv", "number"})
# masked only inside a creditCard object; "account" elsewhere is a customer
CARD_FIELDS = frozenset({"account"})
# name/value pairs whose value is masked
SENSITIVE_NAMES = frozenset({"CVN"})
REDACTED = "[redacted]"


def make_app_context(settings: GatewaySettings) -> Any:
    """Build a processor that stamps app name and environment on events."""

    def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app_name"] = settings.app_name
        event_dict["app_env"] = settings.app_env
        return event_dict

    return add_app_context


def redact(value: Any) -> Any:
    """
    Return a copy of value with credential and card fields masked.

    Call sites that log payloads use this directly, so masking holds even
    when setup_logging() was never called.
    """
    return _redact("", value)


def redact_sensitive(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask credential and card fields, however deeply they are nested."""
    return {key: _redact(key, value) for key, value in event_dict.items()}


def _redact(key: str, value: Any) -> Any:
    if key in SENSITIVE_FIELDS and value is not None:
        return REDACTED
    if isinstance(value, dict):
        # name/value pairs, e.g. {"name": "CVN", "value": "123"}
        if value.get("name") in SENSITIVE_NAMES and "value" in value:
            return {**value, "value": REDACTED}
        if key == "creditCard":
            return {
                k: REDACTED if k in CARD_FIELDS and v is not None else _redact(k, v)
                for k, v in value.items()
            }
        return {k: _redact(k, v) for k, v in value.items()}
    if isinstance(value, list):
        return [_redact(key, v) for v in value]
    return value


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"timestamp": "@timestamp", "name": "logger"},
        )
    )
    return handler


def setup_logging(settings: Optional[GatewaySettings] = None) -> None:
    """
    Configure structlog and the root logger for JSON output.

    Args:
        settings: Settings providing log level and app context; loaded from
            the environment when omitted
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            redact_sensitive,
            make_app_context(settings),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(_json_handler())

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_level=settings.log_level,
        app_env=settings.app_env,
        endpoint=settings.endpoint_url,
    )


def get_logger(name: str, **initial_values: Any) -> Any:
    """
    Get a structured logger, optionally bound to initial fields.

    Example:
        log = get_logger(__name__, merchant="acme")
        log.info("checkout_started", amount="9.99")
    """
    return structlog.get_logger(name, **initial_values)
