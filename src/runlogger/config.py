"""
runlogger Configuration.

Cloud Run exposes the service identity through `K_SERVICE`, `K_REVISION` and
`K_CONFIGURATION`; everything else uses the `RUNLOG_` prefix.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .severity import Severity


class RunLoggerSettings(BaseSettings):
    """Logging facade configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RUNLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Cloud Run service identity
    service: Optional[str] = Field(
        default=None,
        validation_alias="K_SERVICE",
        description="Service name; selects structured output and fills serviceContext",
    )
    revision: Optional[str] = Field(
        default=None,
        validation_alias="K_REVISION",
        description="Service revision name",
    )
    configuration: Optional[str] = Field(
        default=None,
        validation_alias="K_CONFIGURATION",
        description="Service configuration name",
    )

    level: Severity = Field(default=Severity.DEFAULT, description="Minimum severity to emit")
    log_name: str = Field(default="run.googleapis.com/stdout", description="Log name for resolved entries")
    resolve_resource: bool = Field(
        default=False,
        description="Fetch project and region from the metadata server at construction",
    )
    metadata_url: str = Field(
        default="http://metadata.google.internal/computeMetadata/v1",
        description="Metadata server base URL",
    )
    metadata_timeout: float = Field(default=5.0, description="Metadata request timeout in seconds")

    @field_validator("service", "revision", "configuration", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> Severity:
        return Severity.parse(value)  # type: ignore[arg-type]

    @property
    def structured(self) -> bool:
        return self.service is not None
