"""Structured logging configuration for the environment report"""
import logging
import os
import sys
from typing import Any, Dict
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from config import Settings


def setup_structured_logging(settings: Settings) -> None:
    """Setup structured logging with JSON format for production and console for development"""

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Use JSON renderer for production, console for development
    is_development = os.getenv("ENVIRONMENT", "production").lower() == "development"
    if is_development:
        processors.append(ConsoleRenderer())
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, settings.log_level.upper())
    handlers = []

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(settings.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )

    # Set specific logger levels to reduce noise
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('fastapi').setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def log_snapshot_captured(logger: structlog.stdlib.BoundLogger, snapshot) -> None:
    """Log the captured environment snapshot with structured data"""
    values = snapshot.as_dict()
    logger.info(
        "Environment snapshot captured",
        property_count=len(values),
        absent_properties=sorted(name for name, value in values.items() if value is None),
        os_name=snapshot.os_name,
        os_version=snapshot.os_version,
        python_version=snapshot.python_version,
        is_os_unix=snapshot.flags.is_os_unix,
        is_os_windows=snapshot.flags.is_os_windows,
        event_type="snapshot_captured"
    )


def log_server_startup(logger: structlog.stdlib.BoundLogger, settings: Settings) -> None:
    """Log server startup with configuration details"""
    logger.info(
        "Server starting up",
        service_name=settings.service_name,
        service_version=settings.service_version,
        server_host=settings.server_host,
        server_port=settings.server_port,
        overridden_properties=sorted(settings.property_overrides),
        denied_properties=settings.denied_properties,
        event_type="server_startup"
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Dict[str, Any] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error",
        exc_info=True
    )
