"""Test configuration and fixtures."""

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from typing import Any

import pytest
import pytest_asyncio
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from policy_middleware.middleware.dry_run_header import DryRunHeaderMiddleware
from policy_middleware.middleware.exception_handler import register_exception_handlers
from policy_middleware.middleware.opa_middleware import opa_middleware_config
from policy_middleware.middleware.options import OpaMiddlewareOptions
from policy_middleware.schemas.policy import DryRunConfig, PolicyConfiguration

OPA_URL = "http://opa:8181/v1/data"


class FakeDecisionPoint:
    """In-memory decision point recording every call."""

    def __init__(self, decision: dict[str, Any] | None = None, error: Exception | None = None):
        self.decision = decision if decision is not None else {"decision_id": "x", "result": {"allow": True}}
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, request, url, payload, headers=None):
        self.calls.append({"url": url, "payload": payload, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.decision


class RecordingLogger:
    """Policy logger keeping (level, message, payload) tuples."""

    def __init__(self):
        self.records: list[tuple[str, str, Any]] = []

    def __call__(self, request, level, message, payload=None):
        self.records.append((level, message, payload))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


def make_request(
    template: str | None = "/users/{user_id}",
    path: str = "/users/42",
    path_params: dict[str, Any] | None = None,
    method: str = "GET",
    headers: dict[str, str] | None = None,
    root_path: str = "",
) -> Request:
    """Build a Starlette request as seen by a route dependency."""
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "root_path": root_path,
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "path_params": {"user_id": "42"} if path_params is None else path_params,
    }
    if template is not None:
        scope["route"] = SimpleNamespace(path=template)
    return Request(scope)


def build_app(
    policy_config: PolicyConfiguration,
    decision_point: FakeDecisionPoint,
    logger: RecordingLogger | None = None,
    **route_options: Any,
) -> FastAPI:
    """Create an app with a users router protected by the policy dependency."""
    opa_middleware = opa_middleware_config(
        policy_config,
        OpaMiddlewareOptions(do_post=decision_point, logger=logger),
    )

    app = FastAPI()
    register_exception_handlers(app)
    app.add_middleware(DryRunHeaderMiddleware)
    policy = Depends(opa_middleware(**route_options))
    router = APIRouter()

    @router.get("/{user_id}", dependencies=[policy])
    async def get_user(user_id: str, request: Request):
        evaluation = request.state.policy_evaluation
        return {
            "user_id": user_id,
            "allow": evaluation.decision.allow,
            "path": evaluation.path,
            "request": evaluation.request,
        }

    @router.get("/{user_id}/profile", dependencies=[policy])
    async def get_profile(user_id: str):
        return JSONResponse({"user_id": user_id})

    @router.get("/{user_id}/avatar", dependencies=[policy])
    async def get_avatar(user_id: str):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Avatar not found")

    app.include_router(router, prefix="/users")
    return app


@pytest.fixture
def policy_config() -> PolicyConfiguration:
    """Enforced-mode configuration."""
    return PolicyConfiguration(url=OPA_URL, dry_run=DryRunConfig(enabled=False))


@pytest.fixture
def dry_run_config() -> PolicyConfiguration:
    """Dry-run configuration tagging outcomes in ``x-authorizer``."""
    return PolicyConfiguration(url=OPA_URL, dry_run=DryRunConfig(enabled=True, header="x-authorizer"))


@pytest.fixture
def decision_point() -> FakeDecisionPoint:
    return FakeDecisionPoint()


@pytest.fixture
def policy_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest_asyncio.fixture
async def client_for() -> AsyncGenerator:
    """Factory yielding async clients bound to an app."""
    clients: list[AsyncClient] = []

    def _client(app: FastAPI) -> AsyncClient:
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _client

    for client in clients:
        await client.aclose()


@pytest.fixture
def request_factory():
    """Factory for route-level Starlette requests."""
    return make_request


@pytest.fixture
def app_factory():
    """Factory for apps protected by the policy dependency."""
    return build_app
