"""FastAPI example application protected by the policy middleware."""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request

from policy_middleware.config.settings import settings
from policy_middleware.middleware.dry_run_header import DryRunHeaderMiddleware
from policy_middleware.middleware.exception_handler import register_exception_handlers
from policy_middleware.middleware.opa_middleware import opa_middleware_config
from policy_middleware.middleware.options import OpaMiddlewareOptions
from policy_middleware.policies.extractors import header
from policy_middleware.schemas.policy import PolicyEvaluation
from policy_middleware.services.decision_client import HttpxDecisionClient

logging.basicConfig(level=settings.LOG_LEVEL)

# Decision point wiring, resolved once at startup
opa_middleware = opa_middleware_config(
    settings.policy_configuration(),
    OpaMiddlewareOptions(
        do_post=HttpxDecisionClient(
            timeout=settings.OPA_TIMEOUT_SECONDS,
            bearer_token=settings.OPA_BEARER_TOKEN,
        ),
    ),
)

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
)

# Register exception handlers
register_exception_handlers(app)

# Dry-run outcome header on every response
app.add_middleware(DryRunHeaderMiddleware)

users = APIRouter()


@users.get("/{user_id}")
async def get_user(
    user_id: str,
    evaluation: PolicyEvaluation = Depends(opa_middleware(required={"tenant": header("x-tenant")})),
):
    """Return a user together with the decision that let the request through."""
    return {
        "success": True,
        "user": {"id": user_id},
        "decision_id": evaluation.decision.decision_id,
    }


@users.delete("/{user_id}", dependencies=[Depends(opa_middleware())])
async def delete_user(user_id: str, request: Request):
    """Delete a user."""
    return {
        "success": True,
        "message": f"User {user_id} deleted",
        "decision_path": request.state.policy_evaluation.path,
    }


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.API_VERSION,
        "environment": settings.ENVIRONMENT,
        "dry_run": settings.OPA_DRY_RUN_ENABLED,
    }


# Include routers
app.include_router(
    users,
    prefix=f"{settings.API_PREFIX}/users",
    tags=["Users"],
)
