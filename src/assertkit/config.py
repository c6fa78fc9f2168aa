from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeepEqualConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cycle_guard: bool = False


class SourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_string: int = Field(60, ge=4)
    max_level: int = Field(6, ge=1)
    max_items: int = Field(10, ge=1)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    debug_file: str | None = None
    verbose: bool = False
    logger_name: str = "assertkit"

    @field_validator("debug_file")
    @classmethod
    def expand_debug_file(cls, v: str | None) -> str | None:
        """Expand ``${VAR}`` references.

        A variable that is unset and has no default is reported as a
        validation error rather than silently becoming an empty string.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_file references a missing environment variable: {e}") from e

    @field_validator("logger_name")
    @classmethod
    def logger_name_must_be_namespaced(cls, v: str) -> str:
        if not v.startswith("assertkit"):
            raise ValueError(f"Logger name '{v}' must start with 'assertkit'")
        return v


class AssertkitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    deep_equal: DeepEqualConfig = Field(default_factory=DeepEqualConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Path) -> AssertkitConfig:
    """Load and validate an assertkit config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = AssertkitConfig(**(raw or {}))

    # Resolve a relative debug_file relative to the config file location
    debug_file = config.logging.debug_file
    if debug_file and not Path(debug_file).is_absolute():
        config.logging.debug_file = str((config_dir / debug_file).resolve())

    return config
