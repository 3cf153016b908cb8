"""Service layer for outbound calls."""

from .decision_client import DoPost, HttpxDecisionClient

__all__ = [
    "DoPost",
    "HttpxDecisionClient",
]
