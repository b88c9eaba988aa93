"""
Configuration models for sri-metadata using Pydantic v2 Settings.

Values are read from environment variables prefixed with ``SRI_METADATA_``;
nested groups use ``__`` (e.g., ``SRI_METADATA_CORE__INTERNAL_LOGGING_ENABLED``).
"""

from __future__ import annotations

import json
from typing import cast

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .algorithms import HashAlgorithm

LATEST_CONFIG_SCHEMA_VERSION = "1.0"


class CoreSettings(BaseModel):
    """Core behaviour settings."""

    internal_logging_enabled: bool = Field(
        default=False,
        description="Emit DEBUG/WARN diagnostics for discarded metadata and digest issues",
    )
    diagnostics_rate_limit_seconds: float = Field(
        default=5.0,
        ge=0.0,
        description="Minimum interval between diagnostics sharing a rate limit key",
    )
    default_algorithms: list[HashAlgorithm] = Field(
        default_factory=lambda: cast(list[HashAlgorithm], ["sha384"]),
        description="Algorithms used by the CLI when none are requested",
    )

    @field_validator("default_algorithms", mode="before")
    @classmethod
    def _split_algorithms(cls, value: object) -> object:
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                return json.loads(text)
            return [part.strip().lower() for part in text.split(",") if part.strip()]
        return value

    @field_validator("default_algorithms")
    @classmethod
    def _ensure_algorithms_non_empty(
        cls, value: list[HashAlgorithm]
    ) -> list[HashAlgorithm]:
        if not value:
            raise ValueError("default_algorithms must not be empty")
        return value


class Settings(BaseSettings):
    """Top-level configuration model."""

    schema_version: str = Field(default=LATEST_CONFIG_SCHEMA_VERSION)

    core: CoreSettings = Field(default_factory=CoreSettings)

    model_config = SettingsConfigDict(
        env_prefix="SRI_METADATA_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True, exclude_none=True))

    def to_dict(self) -> dict[str, object]:
        return cast(
            dict[str, object],
            self.model_dump(by_alias=True, exclude_none=True),
        )
