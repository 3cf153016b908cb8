"""Policy configuration and decision schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DryRunConfig(BaseModel):
    """Dry-run settings: decisions are logged and tagged but never enforced."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    header: str = Field(default="x-opa-authorizer", min_length=1, description="Response header carrying allow/reject")


class PolicyConfiguration(BaseModel):
    """Process-wide decision point configuration."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Decision point base address, e.g. http://opa:8181/v1/data")
    dry_run: DryRunConfig = Field(default_factory=DryRunConfig)
    admission_control_disabled: bool = Field(
        default=False, description="Force dry-run behaviour regardless of dry_run.enabled"
    )
    production: bool = Field(default=False, description="Emit the admission-control audit log line")

    @property
    def enforced(self) -> bool:
        """Whether rejections halt the request."""
        return not (self.dry_run.enabled or self.admission_control_disabled)


class PolicyDecision(BaseModel):
    """Decision point response. Keys other than ``result.allow`` pass through untouched."""

    model_config = ConfigDict(extra="allow")

    decision_id: str | None = None
    result: dict[str, Any] = Field(default_factory=dict)

    @property
    def allow(self) -> bool | None:
        """Allow flag of the decision, ``None`` when absent."""
        return self.result.get("allow")


class PolicyEvaluation(BaseModel):
    """Per-request record of the evaluation sent and the decision received."""

    request: dict[str, Any]
    decision: PolicyDecision
    path: str
