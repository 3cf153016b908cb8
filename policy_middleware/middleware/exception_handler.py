"""Exception handlers for policy enforcement errors."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from policy_middleware.utils.exceptions import (
    AuthorizationError,
    BasePolicyException,
    DecisionPointError,
    DecisionPointUnavailableError,
    InvalidDecisionError,
    PolicyForbiddenError,
)

logger = logging.getLogger(__name__)


class ExceptionHandlers:
    """Centralized exception handlers for the policy middleware."""

    @staticmethod
    async def policy_exception_handler(request: Request, exc: BasePolicyException) -> JSONResponse:
        """Handle policy rejections and decision point failures."""

        # Map exception types to HTTP status codes
        status_mapping = {
            # Rejections -> 403
            AuthorizationError: status.HTTP_403_FORBIDDEN,
            PolicyForbiddenError: status.HTTP_403_FORBIDDEN,
            # Decision point failures -> 502
            DecisionPointError: status.HTTP_502_BAD_GATEWAY,
            DecisionPointUnavailableError: status.HTTP_502_BAD_GATEWAY,
            InvalidDecisionError: status.HTTP_502_BAD_GATEWAY,
        }

        status_code = status_mapping.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        log = logger.warning if status_code < 500 else logger.error
        log(
            f"Policy exception in {request.method} {request.url}: {exc.message}",
            extra={
                "error_code": exc.error_code,
                "details": exc.details,
                "path": str(request.url.path),
                "method": request.method,
            },
        )

        return JSONResponse(
            status_code=status_code,
            content={
                "success": False,
                "message": exc.message,
                "error_code": exc.error_code or "POLICY_ERROR",
                "details": exc.details,
            },
        )


def register_exception_handlers(app: Any) -> None:
    """Register the policy exception handlers with the FastAPI app."""

    handlers = ExceptionHandlers()

    # Policy rejections and decision point failures
    app.add_exception_handler(BasePolicyException, handlers.policy_exception_handler)
