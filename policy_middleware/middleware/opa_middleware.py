"""Policy enforcement dependency factory.

``opa_middleware_config`` binds the process-wide decision point configuration
and the caller's default options; the returned ``opa_middleware`` builds one
FastAPI dependency per registration, with its own option overrides:

    opa_middleware = opa_middleware_config(settings.policy_configuration(), defaults)

    @router.get("/users/{user_id}", dependencies=[Depends(opa_middleware())])
    async def get_user(user_id: int):
        ...

The dependency stores the evaluation on ``request.state.policy_evaluation`` and
returns it, so endpoints can also declare it as a parameter. In dry-run mode
the outcome is kept on ``request.state.policy_dry_run`` for
``DryRunHeaderMiddleware``, which tags every response shape.
"""

import inspect
from typing import Any, Awaitable, Callable

from fastapi import Request, Response
from pydantic import ValidationError

from policy_middleware.middleware.options import OpaMiddlewareOptions, merge_options, resolve_options
from policy_middleware.policies.decision_handler import REJECTIONS
from policy_middleware.policies.required import fetch_required_data
from policy_middleware.schemas.policy import PolicyConfiguration, PolicyDecision, PolicyEvaluation
from policy_middleware.utils.exceptions import InvalidDecisionError

AUDIT_MESSAGE = "|||---OPA-POLICY-ADMISSION-CONTROL-DISABLED---|||"

PolicyDependency = Callable[[Request, Response], Awaitable[PolicyEvaluation]]


def opa_middleware_config(
    policy_config: PolicyConfiguration,
    defaults: OpaMiddlewareOptions | None = None,
) -> Callable[..., PolicyDependency]:
    """
    Create a factory of policy enforcement dependencies.

    Args:
        policy_config: Decision point address and dry-run settings
        defaults: Caller defaults applied to every registration
    """

    def opa_middleware(options: OpaMiddlewareOptions | None = None, **overrides: Any) -> PolicyDependency:
        """
        Build the dependency for one route, router or app.

        ``options`` and keyword ``overrides`` (field names of
        ``OpaMiddlewareOptions``) take precedence over the factory defaults.
        """
        if overrides:
            options = merge_options(options or OpaMiddlewareOptions(), OpaMiddlewareOptions(**overrides))
        resolved = resolve_options(defaults, options)
        log = resolved.logger

        async def opa_dependency(request: Request, response: Response) -> PolicyEvaluation:
            required_data = fetch_required_data(request, resolved.required, log)
            opa_request = resolved.to_policy_evaluation_request(request, required_data)
            policy_path = f"{policy_config.url}{resolved.decision_path(request)}"

            data = await resolved.do_post(request, policy_path, opa_request)
            try:
                decision = PolicyDecision.model_validate(data)
            except ValidationError as e:
                errors = e.errors(include_url=False, include_context=False)
                raise InvalidDecisionError(details={"path": policy_path, "errors": errors}) from e

            decision_log = {
                "allow": decision.allow,
                "decision": {"decision_path": policy_path, **decision.result},
                "request": opa_request,
            }
            log(
                request,
                "trace",
                f"OPA-POLICY-{'OK' if decision.allow else 'KO'} - Request Access Control",
                decision_log,
            )

            evaluation = PolicyEvaluation(decision=decision, request=opa_request, path=policy_path)
            request.state.policy_evaluation = evaluation

            if policy_config.enforced:
                await _apply(resolved.on_decision, evaluation, request, response)
                return evaluation

            rejection = None
            try:
                await _apply(resolved.on_decision, evaluation, request, response)
            except REJECTIONS as e:
                rejection = e

            if policy_config.production:
                log(request, "error", AUDIT_MESSAGE, {"rejected": rejection is not None, "decision_log": decision_log})
            outcome = "reject" if rejection is not None else "allow"
            request.state.policy_dry_run = {"header": policy_config.dry_run.header, "outcome": outcome}
            response.headers.append(policy_config.dry_run.header, outcome)
            return evaluation

        return opa_dependency

    return opa_middleware


async def _apply(on_decision, evaluation: PolicyEvaluation, request: Request, response: Response) -> None:
    # custom handlers may be coroutines
    result = on_decision(evaluation, request, response)
    if inspect.isawaitable(result):
        await result
