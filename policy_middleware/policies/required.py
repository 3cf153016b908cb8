"""Required field extraction."""

from collections.abc import Callable, Mapping
from typing import Any

from fastapi import Request

from policy_middleware.utils.policy_logging import PolicyLogger

RequiredHandler = Mapping[str, Callable[[Request], Any]]


def fetch_required_data(
    request: Request,
    required: RequiredHandler,
    logger: PolicyLogger,
) -> dict[str, Any]:
    """
    Run every extractor in ``required`` against the request.

    Extraction is best effort: an extractor that raises is logged and its
    field is set to ``None``, the remaining fields are still computed.
    """
    data: dict[str, Any] = {}
    for key, extract in required.items():
        try:
            data[key] = extract(request)
        except Exception as e:
            logger(request, "error", f"KO OPA-MID--FETCH-DATA {key}", {"field": key, "error": repr(e)})
            data[key] = None
    return data
