"""Policy event logging on top of the standard logging module."""

import logging
from typing import Any, Callable, Literal

from fastapi import Request

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LogLevel = Literal["info", "debug", "error", "trace", "warn"]

# (request, level, message, payload) -> None
PolicyLogger = Callable[[Request, LogLevel, str, Any], None]

LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

logger = logging.getLogger("policy_middleware.policy")


def log_policy_event(request: Request, level: LogLevel, message: str, payload: Any = None) -> None:
    """
    Default policy logger.

    Emits ``message`` through the ``policy_middleware.policy`` logger with the
    request method, path and payload attached as structured ``extra`` fields.
    Unknown levels are logged at INFO.
    """
    log_level = LEVELS.get(level, logging.INFO)
    if not logger.isEnabledFor(log_level):
        return

    logger.log(
        log_level,
        message,
        extra={
            "method": request.method,
            "path": request.url.path,
            "policy": payload,
        },
    )
