"""Decision path resolution."""

from typing import Protocol

from fastapi import Request


class DecisionPath(Protocol):
    """Derives the decision point sub-path for a request."""

    def __call__(self, request: Request) -> str: ...


def _base_path(request: Request) -> str:
    """
    Mount path of the matched route.

    The ASGI ``root_path`` followed by the literal part of the route template
    that precedes its first path parameter, e.g. ``/users/{user_id}/posts``
    gives ``/users``. Falls back to the URL path when no route matched.
    """
    root_path = request.scope.get("root_path", "")
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if template is None:
        path = request.url.path
        return path if path.startswith(root_path) else f"{root_path}{path}"

    prefix = template.split("{", 1)[0]
    if "{" in template:
        prefix = prefix.rsplit("/", 1)[0]
    return f"{root_path}{prefix.rstrip('/')}"


def _segment(name: str) -> str:
    return name[: -len("_id")] if name.endswith("_id") else name


def default_decision_path(request: Request) -> str:
    """
    Map a RESTful route onto a policy package path.

    Every path parameter contributes one segment named after the parameter,
    with a trailing ``_id`` stripped, in declaration order.

    Usage:
        GET /users/{user_id}                       -> /users/user
        GET /orgs/{org_id}/members/{member_id}     -> /orgs/org/member
    """
    segments = "".join(f"/{_segment(name)}" for name in request.path_params)
    return f"{_base_path(request)}{segments}"
