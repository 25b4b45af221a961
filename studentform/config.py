"""Global configuration for studentform.

Configuration lives in ``~/.config/studentform/config.yaml`` (the
directory can be moved with STUDENT_FORM_HOME). Environment variables
override values read from the file.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

ENV_HOME = "STUDENT_FORM_HOME"
ENV_LOG_LEVEL = "STUDENT_FORM_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when the config file cannot be used."""

    pass


class StudentFormConfig(BaseModel):
    """Resolved configuration values."""

    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_student_form_home() -> Path:
    """Return the studentform config directory."""
    env_home = os.environ.get(ENV_HOME)
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "studentform"


def get_config_path() -> Path:
    """Return the path of the global config file."""
    return get_student_form_home() / "config.yaml"


def load_global_config(path: Path | str | None = None) -> dict[str, Any]:
    """Load the raw global config file.

    Args:
        path: Optional config path. Defaults to the global config file.

    Returns:
        The parsed mapping, or an empty dict if the file does not exist.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def load_config(path: Path | str | None = None) -> StudentFormConfig:
    """Load the config file and apply environment overrides."""
    data = load_global_config(path)

    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        data["log_level"] = env_level

    try:
        return StudentFormConfig.model_validate(data)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def write_default_config(path: Path | str | None = None, force: bool = False) -> Path:
    """Write a config file holding the default values.

    Raises:
        ConfigError: If the file exists and force is False.
    """
    config_path = Path(path) if path is not None else get_config_path()
    if config_path.exists() and not force:
        raise ConfigError(f"Config already exists at {config_path}")

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(StudentFormConfig().model_dump(), f, sort_keys=False)
    return config_path
