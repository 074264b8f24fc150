"""
Planner configuration.

Tunables live in an optional YAML file under a ``planner:`` section:

    planner:
      day_start_hour: 8
      day_end_hour: 18
      block_minutes: 30
      pomodoro_minutes: 25
      chronotype: intermediate

The file is looked up from the explicit path, then from the
POMODORO_PLANNER_CONFIG environment variable. Without a file the defaults apply.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from pomodoro_planner.enums import Chronotype

CONFIG_ENV_VAR = "POMODORO_PLANNER_CONFIG"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""


class PlannerConfig(BaseModel):
    """Tunable constants for time-block generation and duration estimates."""

    day_start_hour: int = Field(default=8, ge=0, le=23)
    day_end_hour: int = Field(default=18, ge=1, le=24)
    block_minutes: int = Field(default=30, ge=5, le=120)
    pomodoro_minutes: int = Field(default=25, ge=1)
    chronotype: Chronotype = Chronotype.INTERMEDIATE

    @model_validator(mode="after")
    def validate_window(self) -> PlannerConfig:
        if self.day_end_hour <= self.day_start_hour:
            raise ValueError("day_end_hour must be after day_start_hour")
        if 60 % self.block_minutes:
            raise ValueError("block_minutes must divide an hour evenly")
        return self


DEFAULT_CONFIG = PlannerConfig()


def load_config(path: str | Path | None = None) -> PlannerConfig:
    """
    Load configuration from YAML, falling back to defaults.

    Args:
        path: Config file path; defaults to $POMODORO_PLANNER_CONFIG

    Returns:
        Validated PlannerConfig

    Raises:
        ConfigError: If the file exists but is malformed
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return PlannerConfig()

    config_path = Path(path)
    if not config_path.exists():
        return PlannerConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    try:
        return PlannerConfig.model_validate(data.get("planner") or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid planner config in {config_path}: {e}") from e
