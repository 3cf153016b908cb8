"""Application configuration using Pydantic settings."""

from pydantic import AnyHttpUrl, Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from policy_middleware.schemas.policy import DryRunConfig, PolicyConfiguration


class Settings(BaseSettings):
    """Policy middleware settings with environment variable support."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=True)

    # API Configuration
    API_TITLE: str = "Policy Enforcement API"
    API_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"

    # Environment
    ENVIRONMENT: str = "development"

    # Decision point
    OPA_URL: str = Field(default="http://localhost:8181/v1/data", description="Decision point base address")
    OPA_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0)
    OPA_BEARER_TOKEN: str | None = None

    # Dry run / admission control
    OPA_DRY_RUN_ENABLED: bool = False
    OPA_DRY_RUN_HEADER: str = "x-opa-authorizer"
    OPA_ADMISSION_CONTROL_DISABLED: bool = False

    # Monitoring
    LOG_LEVEL: str = "INFO"

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("OPA_URL")
    @classmethod
    def validate_opa_url(cls, v):
        """Validate the decision point address and drop a trailing slash."""
        try:
            TypeAdapter(AnyHttpUrl).validate_python(v)
        except ValidationError as e:
            raise ValueError(f"Invalid decision point URL: {v}") from e
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        """Whether the production-only audit logging applies."""
        return self.ENVIRONMENT == "production"

    def policy_configuration(self) -> PolicyConfiguration:
        """Resolve the process-wide policy configuration once, at startup."""
        return PolicyConfiguration(
            url=self.OPA_URL,
            dry_run=DryRunConfig(enabled=self.OPA_DRY_RUN_ENABLED, header=self.OPA_DRY_RUN_HEADER),
            admission_control_disabled=self.OPA_ADMISSION_CONTROL_DISABLED,
            production=self.is_production,
        )


# Global settings instance
settings = Settings()
