"""Pydantic schemas."""

from .policy import DryRunConfig, PolicyConfiguration, PolicyDecision, PolicyEvaluation

__all__ = [
    "DryRunConfig",
    "PolicyConfiguration",
    "PolicyDecision",
    "PolicyEvaluation",
]
