"""Pluggable policy pipeline stages."""

from .decision_handler import REJECTIONS, OnDecisionHandler, default_on_decision, respond_with_decision
from .decision_path import DecisionPath, default_decision_path
from .evaluation_request import ToPolicyEvaluationRequest, default_evaluation_request
from .extractors import header, path_param, query, state
from .required import RequiredHandler, fetch_required_data

__all__ = [
    "DecisionPath",
    "OnDecisionHandler",
    "RequiredHandler",
    "ToPolicyEvaluationRequest",
    "REJECTIONS",
    "default_decision_path",
    "default_evaluation_request",
    "default_on_decision",
    "respond_with_decision",
    "fetch_required_data",
    "header",
    "query",
    "path_param",
    "state",
]
