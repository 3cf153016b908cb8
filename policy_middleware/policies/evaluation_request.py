"""Policy evaluation request building."""

from typing import Any, Protocol

from fastapi import Request


class ToPolicyEvaluationRequest(Protocol):
    """Builds the input document sent to the decision point."""

    def __call__(self, request: Request, required: dict[str, Any]) -> dict[str, Any]: ...


def default_evaluation_request(request: Request, required: dict[str, Any]) -> dict[str, Any]:
    """
    Merge the required fields with the request method and path parameters.

    The result is the bare input document; the decision point client wraps it
    in the ``input`` envelope. A required field named ``req`` is overridden.
    """
    return {
        **required,
        "req": {
            "method": request.method,
            "params": dict(request.path_params),
        },
    }
