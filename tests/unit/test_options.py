"""Tests for layered option resolution."""

from policy_middleware.middleware.options import OpaMiddlewareOptions, merge_options, resolve_options
from policy_middleware.policies.decision_handler import default_on_decision, respond_with_decision
from policy_middleware.policies.decision_path import default_decision_path
from policy_middleware.policies.evaluation_request import default_evaluation_request
from policy_middleware.services.decision_client import HttpxDecisionClient
from policy_middleware.utils.policy_logging import log_policy_event


def a(request):
    return 1


def b(request):
    return 2


def b_override(request):
    return 3


class TestResolveOptions:
    """Library defaults, caller defaults and route options, in that order."""

    def test_library_defaults(self):
        resolved = resolve_options()

        assert resolved.required == {}
        assert resolved.decision_path is default_decision_path
        assert resolved.on_decision is default_on_decision
        assert resolved.to_policy_evaluation_request is default_evaluation_request
        assert resolved.logger is log_policy_event
        assert isinstance(resolved.do_post, HttpxDecisionClient)

    def test_required_merges_per_field(self):
        defaults = OpaMiddlewareOptions(required={"a": a, "b": b})
        route = OpaMiddlewareOptions(required={"b": b_override})

        resolved = resolve_options(defaults, route)

        assert resolved.required == {"a": a, "b": b_override}

    def test_route_overrides_single_stage(self):
        def path(request):
            return "/custom"

        defaults = OpaMiddlewareOptions(decision_path=path)
        route = OpaMiddlewareOptions(on_decision=respond_with_decision)

        resolved = resolve_options(defaults, route)

        assert resolved.decision_path is path
        assert resolved.on_decision is respond_with_decision
        assert resolved.to_policy_evaluation_request is default_evaluation_request

    def test_none_layers_are_skipped(self):
        resolved = resolve_options(None, OpaMiddlewareOptions(required={"a": a}), None)
        assert resolved.required == {"a": a}

    def test_layers_are_not_mutated(self):
        defaults = OpaMiddlewareOptions(required={"a": a})
        resolve_options(defaults, OpaMiddlewareOptions(required={"b": b}))
        assert defaults.required == {"a": a}


def test_merge_keeps_base_fields():
    base = OpaMiddlewareOptions(required={"a": a}, decision_path=default_decision_path)
    merged = merge_options(base, OpaMiddlewareOptions())
    assert merged == base
