"""Policy decision point middleware for FastAPI."""

from .middleware.dry_run_header import DryRunHeaderMiddleware
from .middleware.exception_handler import register_exception_handlers
from .middleware.opa_middleware import opa_middleware_config
from .middleware.options import OpaMiddlewareOptions, resolve_options
from .policies import (
    default_decision_path,
    default_evaluation_request,
    default_on_decision,
    fetch_required_data,
    respond_with_decision,
)
from .schemas.policy import DryRunConfig, PolicyConfiguration, PolicyDecision, PolicyEvaluation
from .services.decision_client import HttpxDecisionClient
from .utils.exceptions import (
    AuthorizationError,
    DecisionPointError,
    DecisionPointUnavailableError,
    InvalidDecisionError,
    PolicyForbiddenError,
)

__all__ = [
    "opa_middleware_config",
    "OpaMiddlewareOptions",
    "resolve_options",
    "register_exception_handlers",
    "DryRunHeaderMiddleware",
    "default_decision_path",
    "default_evaluation_request",
    "default_on_decision",
    "respond_with_decision",
    "fetch_required_data",
    "DryRunConfig",
    "PolicyConfiguration",
    "PolicyDecision",
    "PolicyEvaluation",
    "HttpxDecisionClient",
    "AuthorizationError",
    "PolicyForbiddenError",
    "InvalidDecisionError",
    "DecisionPointError",
    "DecisionPointUnavailableError",
]
