"""Utility functions and classes."""

from .exceptions import (
    AuthorizationError,
    BasePolicyException,
    DecisionPointError,
    DecisionPointUnavailableError,
    InvalidDecisionError,
    PolicyForbiddenError,
)
from .policy_logging import TRACE, PolicyLogger, log_policy_event

__all__ = [
    # Exceptions
    "BasePolicyException",
    "AuthorizationError",
    "PolicyForbiddenError",
    "InvalidDecisionError",
    "DecisionPointError",
    "DecisionPointUnavailableError",
    # Logging
    "TRACE",
    "PolicyLogger",
    "log_policy_event",
]
