"""Decision handlers.

A decision handler receives the evaluation attached to the request and either
returns, letting the request proceed, or raises to reject it. Rejections are
``AuthorizationError`` or ``HTTPException`` instances; in dry-run mode they are
recorded instead of propagated.
"""

from typing import Protocol

from fastapi import HTTPException, Request, Response, status

from policy_middleware.schemas.policy import PolicyEvaluation
from policy_middleware.utils.exceptions import AuthorizationError, PolicyForbiddenError

REJECTIONS = (AuthorizationError, HTTPException)


class OnDecisionHandler(Protocol):
    """Applies a policy decision to the request."""

    def __call__(self, evaluation: PolicyEvaluation, request: Request, response: Response) -> None: ...


def default_on_decision(evaluation: PolicyEvaluation, request: Request, response: Response) -> None:
    """Proceed when the decision allows the request, raise ``PolicyForbiddenError`` otherwise."""
    if evaluation.decision.allow:
        return
    raise PolicyForbiddenError(details={"decision_id": evaluation.decision.decision_id, "path": evaluation.path})


def respond_with_decision(evaluation: PolicyEvaluation, request: Request, response: Response) -> None:
    """
    Reject with the full decision as the 403 response body.

    Usage:
        opa_middleware(on_decision=respond_with_decision)
    """
    if evaluation.decision.allow:
        return
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=evaluation.decision.model_dump(),
    )
