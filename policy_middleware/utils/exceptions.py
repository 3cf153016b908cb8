"""Custom exceptions for policy enforcement."""

from typing import Any, Dict, Optional


class BasePolicyException(Exception):
    """Base exception for policy enforcement errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthorizationError(BasePolicyException):
    """Raised when a policy decision rejects the request."""

    def __init__(self, message: str = "Access denied", **kwargs):
        kwargs.setdefault("error_code", "ACCESS_DENIED")
        super().__init__(message, **kwargs)


class PolicyForbiddenError(AuthorizationError):
    """Raised by the default decision handler when the decision does not allow the request."""

    def __init__(self, message: str = "OPA-POLICY - FORBIDDEN", **kwargs):
        kwargs.setdefault("error_code", "POLICY_FORBIDDEN")
        super().__init__(message, **kwargs)


class InvalidDecisionError(BasePolicyException):
    """Raised when the decision point response is not shaped like a decision."""

    def __init__(self, message: str = "Decision point returned an invalid decision", **kwargs):
        kwargs.setdefault("error_code", "INVALID_DECISION")
        super().__init__(message, **kwargs)


class DecisionPointError(BasePolicyException):
    """Raised when the decision point answers with a non-2xx status."""

    def __init__(self, message: str = "Decision point returned an error", **kwargs):
        kwargs.setdefault("error_code", "DECISION_POINT_ERROR")
        super().__init__(message, **kwargs)


class DecisionPointUnavailableError(DecisionPointError):
    """Raised when the decision point cannot be reached (connection failure, timeout)."""

    def __init__(self, message: str = "Decision point unreachable", **kwargs):
        kwargs.setdefault("error_code", "DECISION_POINT_UNAVAILABLE")
        super().__init__(message, **kwargs)
