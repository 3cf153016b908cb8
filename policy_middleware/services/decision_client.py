"""Decision point client."""

import logging
from typing import Any, Protocol

import httpx
from fastapi import Request

from policy_middleware.utils.exceptions import DecisionPointError, DecisionPointUnavailableError

logger = logging.getLogger(__name__)


class DoPost(Protocol):
    """Posts an evaluation request to the decision point and returns the decoded decision."""

    async def __call__(
        self,
        request: Request,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]: ...


class HttpxDecisionClient:
    """Decision point client backed by httpx."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
        bearer_token: str | None = None,
    ):
        """
        Initialize the decision point client.

        Args:
            client: Shared async client; when omitted a client is opened per call
            timeout: Request timeout in seconds for per-call clients
            bearer_token: Token sent as ``Authorization: Bearer`` on every call
        """
        self.client = client
        self.timeout = timeout
        self.headers = {"Content-Type": "application/json"}
        if bearer_token:
            self.headers["Authorization"] = f"Bearer {bearer_token}"

    async def __call__(
        self,
        request: Request,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        POST ``{"input": payload}`` to ``url``.

        Non-2xx responses raise ``DecisionPointError`` and transport failures
        raise ``DecisionPointUnavailableError``, both chained to the ``httpx``
        exception; nothing is retried.
        """
        body = {"input": payload}
        request_headers = {**self.headers, **(headers or {})}

        try:
            if self.client is not None:
                response = await self.client.post(url, json=body, headers=request_headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, json=body, headers=request_headers)
        except httpx.HTTPError as e:
            raise DecisionPointUnavailableError(details={"url": url, "reason": type(e).__name__}) from e

        logger.debug(
            "Decision point responded",
            extra={"url": url, "status_code": response.status_code, "method": request.method},
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DecisionPointError(details={"url": url, "upstream_status": response.status_code}) from e
        return response.json()
