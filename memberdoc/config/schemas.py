"""
Configuration schemas using Pydantic for validation.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..model.elements import AccessLevel

AccessName = Literal["public", "protected", "package", "private"]


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str | bool = Field(default="info", description="Log level or false")
    colors: bool = Field(default=False, description="Colored console output")
    micros: bool = Field(default=False, description="Sub-second timestamps")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Validate log level is a recognized level."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "FALSE"]
        if isinstance(v, str) and v.upper() not in valid_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(valid_levels)}"
            )
        return v

    model_config = ConfigDict(extra="forbid")


class BuildOptions(BaseModel):
    """
    Options shared by every builder and writer during a build pass.

    Passed explicitly through the build context; nothing reads them from
    module-level state.
    """

    no_comment: bool = Field(
        default=False, description="Omit descriptive comments for members"
    )
    no_deprecated: bool = Field(
        default=False, description="Exclude deprecated members from the output"
    )
    no_since: bool = Field(default=False, description="Omit 'since' tags")
    show_access: AccessName = Field(
        default="protected", description="Most permissive access level to document"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("show_access", mode="before")
    @classmethod
    def normalize_access(cls, v: Any) -> Any:
        """Accept access names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def access_level(self) -> AccessLevel:
        """The show_access option as an AccessLevel."""
        return AccessLevel.parse(self.show_access)


class DocConfig(BaseModel):
    """
    Complete memberdoc configuration schema.

    Validates the structure of memberdoc.yaml configuration files.
    """

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    options: BuildOptions = Field(
        default_factory=BuildOptions, description="Build options"
    )

    model_config = ConfigDict(extra="allow")


def validate_config(config_dict: dict[str, Any]) -> DocConfig:
    """
    Validate a configuration dictionary against the schema.

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return DocConfig(**config_dict)
