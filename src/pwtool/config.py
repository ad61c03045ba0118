"""Configuration system for pwtool.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (PWTOOL_*) -> .env file -> field defaults.

Command-line overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwtool.builder import MAX_LENGTH, MIN_LENGTH
from pwtool.charset import ClassSet
from pwtool.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class PwtoolConfig(BaseSettings):
    """Configuration for pwtool.

    Resolution order: init kwargs -> env vars (PWTOOL_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="PWTOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Generation ---

    count: int = Field(
        default=10,
        ge=1,
        description="Number of passwords generated per run",
    )
    length: int = Field(
        default=MIN_LENGTH,
        ge=MIN_LENGTH,
        le=MAX_LENGTH,
        description="Password length",
    )
    specials: str = Field(
        default="",
        description="Override for the special character alphabet (empty = default set)",
    )
    no_special: bool = Field(
        default=False,
        description="Exclude special characters entirely",
    )

    # --- Entropy ---

    entropy_source_type: str = Field(
        default="system",
        description="Entropy source identifier from the registry",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Diagnostic verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Keep all generation records in memory for analysis",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value

    def class_set(self) -> ClassSet:
        """Build the :class:`ClassSet` described by this configuration."""
        return ClassSet(no_special=self.no_special, special_override=self.specials)


_ALL_FIELDS = frozenset(PwtoolConfig.model_fields.keys())


def load_config(**kwargs: Any) -> PwtoolConfig:
    """Load configuration from kwargs, environment and ``.env``.

    Raises:
        ConfigValidationError: If any value fails validation.
    """
    try:
        return PwtoolConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigValidationError(_format_errors(exc)) from exc


def resolve_config(
    defaults: PwtoolConfig,
    overrides: dict[str, Any] | None,
) -> PwtoolConfig:
    """Create a new config instance merging defaults with overrides.

    ``None`` values in *overrides* mean "not given" and are skipped.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to apply, e.g. from command-line options.

    Returns:
        A new PwtoolConfig with overrides applied, or *defaults* if nothing
        was overridden.

    Raises:
        ConfigValidationError: If a key is unknown or a value is invalid.
    """
    if not overrides:
        return defaults

    applied: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: {key!r}")
        if value is not None:
            applied[key] = value

    if not applied:
        return defaults

    # model_copy(update=...) skips validation; model_validate does not.
    merged = defaults.model_dump()
    merged.update(applied)
    try:
        return PwtoolConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(_format_errors(exc)) from exc


def _format_errors(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "config"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
