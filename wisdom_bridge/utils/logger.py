# wisdom_bridge/utils/logger.py
"""
structlog setup shared by the services and the Streamlit frontend.

Call configure_logging() once at process start; modules then log with
structlog.get_logger(__name__) and key/value pairs:

    logger.info("recommendation finished", outcome="ok", count=2)
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, WrappedLogger

SENSITIVE_FIELDS = {"password", "api_key", "token", "secret", "credential", "auth"}


def mask_credentials(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values of credential-like keys with ***MASKED***"""
    for key in list(event_dict.keys()):
        key_lower = key.lower()
        for sensitive in SENSITIVE_FIELDS:
            if (
                key_lower == sensitive
                or key_lower.endswith(f"_{sensitive}")
                or key_lower.startswith(f"{sensitive}_")
            ):
                event_dict[key] = "***MASKED***"
                break
    return event_dict


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog on top of the standard library logging module

    Args:
        log_level: Level name, defaults to LOG_LEVEL from config
        log_format: "console" for human readable lines, "json" for one JSON object per line
    """
    from wisdom_bridge.config import LOG_LEVEL, LOG_FORMAT

    level_name = (log_level or LOG_LEVEL).upper()
    renderer_name = (log_format or LOG_FORMAT).lower()

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        stream=sys.stdout,
    )

    if renderer_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            mask_credentials,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
