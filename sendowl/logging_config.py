"""
Logging configuration for the SendOwl transport.

Structured logging on top of the standard library: JSON lines for production,
coloured console output for development. A correlation ID held in a context
variable is attached to every event, so all requests made for one caller
operation can be grouped together.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from structlog.types import EventDict

if TYPE_CHECKING:
    from sendowl.config.settings import LoggingConfig


correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    structlog processor copying the current correlation ID into the event.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        The event dictionary, with ``correlation_id`` when one is set
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        correlation_id: ID to use. A random UUID4 is generated when omitted.

    Returns:
        The correlation ID now in effect
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Remove the correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """Return the correlation ID of the current context, if any."""
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Write to this file instead of stderr.
        json_format: JSON lines when True, console rendering otherwise.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_logging_from_config(config: "LoggingConfig") -> None:
    """Apply the ``logging`` section of a loaded configuration."""
    setup_logging(
        level=config.level,
        log_file=Path(config.file) if config.file else None,
        json_format=config.json_format,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for a module.

    Args:
        name: Module name, usually ``__name__``. Names outside the
            ``sendowl`` namespace are prefixed with ``sendowl.``.

    Returns:
        Structured logger instance.
    """
    if name == "sendowl" or name.startswith("sendowl."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"sendowl.{name}")


def log_http_exchange(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a completed HTTP request/response exchange at DEBUG.

    Args:
        logger: Logger instance
        method: HTTP method ("GET", "POST", "PUT", "DELETE")
        path: Request path relative to the base URL
        status_code: Response status code
        duration_ms: Round trip duration in milliseconds
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "http_exchange",
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }

    log_data.update(kwargs)

    logger.debug("http_exchange", **log_data)
