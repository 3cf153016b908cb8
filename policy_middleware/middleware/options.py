"""Middleware options and their layered resolution."""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from policy_middleware.policies.decision_handler import OnDecisionHandler, default_on_decision
from policy_middleware.policies.decision_path import DecisionPath, default_decision_path
from policy_middleware.policies.evaluation_request import (
    ToPolicyEvaluationRequest,
    default_evaluation_request,
)
from policy_middleware.policies.required import RequiredHandler
from policy_middleware.services.decision_client import DoPost, HttpxDecisionClient
from policy_middleware.utils.policy_logging import PolicyLogger, log_policy_event


@dataclass(frozen=True)
class OpaMiddlewareOptions:
    """Per-registration options. ``None`` means "inherit from the previous layer"."""

    required: RequiredHandler | None = None
    decision_path: DecisionPath | None = None
    on_decision: OnDecisionHandler | None = None
    to_policy_evaluation_request: ToPolicyEvaluationRequest | None = None
    do_post: DoPost | None = None
    logger: PolicyLogger | None = None


@dataclass(frozen=True)
class ResolvedOptions:
    """Fully populated options used by a registered middleware."""

    decision_path: DecisionPath
    on_decision: OnDecisionHandler
    to_policy_evaluation_request: ToPolicyEvaluationRequest
    do_post: DoPost
    logger: PolicyLogger
    required: dict[str, Any] = field(default_factory=dict)


def library_defaults() -> OpaMiddlewareOptions:
    """Built-in implementation of every stage."""
    return OpaMiddlewareOptions(
        required={},
        decision_path=default_decision_path,
        on_decision=default_on_decision,
        to_policy_evaluation_request=default_evaluation_request,
        do_post=HttpxDecisionClient(),
        logger=log_policy_event,
    )


def merge_options(base: OpaMiddlewareOptions, override: OpaMiddlewareOptions) -> OpaMiddlewareOptions:
    """
    Merge ``override`` onto ``base`` field by field.

    Set fields of ``override`` win; ``required`` mappings are merged key by
    key so a route can add or replace single extractors.
    """
    changes: dict[str, Any] = {}
    for f in fields(OpaMiddlewareOptions):
        value = getattr(override, f.name)
        if value is None:
            continue
        if f.name == "required" and base.required is not None:
            value = {**base.required, **value}
        changes[f.name] = value
    return replace(base, **changes)


def resolve_options(*layers: OpaMiddlewareOptions | None) -> ResolvedOptions:
    """
    Resolve ordered option layers on top of the library defaults.

    Usage:
        resolve_options(caller_defaults, route_options)
    """
    merged = library_defaults()
    for layer in layers:
        if layer is not None:
            merged = merge_options(merged, layer)

    return ResolvedOptions(
        required=dict(merged.required or {}),
        decision_path=merged.decision_path,
        on_decision=merged.on_decision,
        to_policy_evaluation_request=merged.to_policy_evaluation_request,
        do_post=merged.do_post,
        logger=merged.logger,
    )
