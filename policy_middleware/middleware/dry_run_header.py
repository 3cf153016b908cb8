"""Dry-run outcome header middleware."""

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class DryRunHeaderMiddleware(BaseHTTPMiddleware):
    """
    Copy the dry-run outcome recorded by the policy dependency onto the response.

    The dependency keeps ``{"header": ..., "outcome": "allow" | "reject"}`` on
    ``request.state.policy_dry_run``. Writing it here reaches every response
    shape: plain return values, ``Response`` objects returned by the endpoint and
    responses rendered from exceptions raised after the dependency ran.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and tag the response with the dry-run outcome."""

        # Share the state dict with the route before it runs
        request.state.policy_dry_run = None

        response = await call_next(request)

        dry_run = request.state.policy_dry_run
        if dry_run is not None:
            response.headers[dry_run["header"]] = dry_run["outcome"]

        return response
