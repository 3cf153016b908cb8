"""Extractor factories for the ``required`` mapping.

Each factory returns a ``(request) -> value`` callable that raises ``KeyError``
when the value is missing, so the field degrades to ``None`` and the failure
is logged.

Usage:
    opa_middleware(required={
        "tenant": header("x-tenant"),
        "user": state("user_id"),
    })
"""

from collections.abc import Callable
from typing import Any

from fastapi import Request

Extractor = Callable[[Request], Any]


def header(name: str) -> Extractor:
    """Read a request header."""

    def extract(request: Request) -> str:
        return request.headers[name]

    return extract


def query(name: str) -> Extractor:
    """Read a query string parameter."""

    def extract(request: Request) -> str:
        return request.query_params[name]

    return extract


def path_param(name: str) -> Extractor:
    """Read a resolved path parameter."""

    def extract(request: Request) -> Any:
        return request.path_params[name]

    return extract


def state(attr: str) -> Extractor:
    """Read an attribute set on ``request.state`` by an earlier middleware."""

    def extract(request: Request) -> Any:
        try:
            return getattr(request.state, attr)
        except AttributeError as e:
            raise KeyError(attr) from e

    return extract
