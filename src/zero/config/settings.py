"""
Wizard settings.

Loads and merges settings from multiple sources:
1. Default values
2. Settings file (--config, or $ZERO_HOME/settings.yaml)
3. Environment variables (ZERO_*)

CLI flags are applied on top by the caller.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ZERO_"


class ConfigurationError(Exception):
    """Raised when settings loading or validation fails."""

    pass


class WizardSettings(BaseModel):
    """Tunables for a wizard session."""

    model_config = ConfigDict(extra="ignore")

    # Animation
    tick_interval: float = Field(default=0.1, gt=0.0)
    splash_seconds: float = Field(default=3.0, ge=0.0)
    show_splash: bool = True

    # Appearance
    theme: Literal["auto", "dark", "light", "mono"] = "auto"

    # Field editor character limits
    directory_limit: int = Field(default=120, ge=1)
    name_limit: int = Field(default=80, ge=1)
    domain_limit: int = Field(default=120, ge=1)


def get_zero_home() -> Path:
    """
    Get the Zero home directory.

    Resolution order:
    1. ZERO_HOME environment variable
    2. Default: ~/.zero
    """
    env_home = os.environ.get("ZERO_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".zero"


def get_settings_path() -> Path:
    """Get the path to the default settings file."""
    return get_zero_home() / "settings.yaml"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML settings file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dictionary, empty if the file does not exist.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Settings in {path} must be a mapping")
    return content


def _parse_env_value(value: str) -> Any:
    """Parse an environment variable value to bool, int, float or string."""
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    if re.match(r"^-?\d+$", value):
        return int(value)

    if re.match(r"^-?\d+\.\d+$", value):
        return float(value)

    return value


def apply_env_overrides(settings: dict[str, Any]) -> dict[str, Any]:
    """
    Apply ZERO_<FIELD> environment variables on top of a settings dict.

    Only names matching a WizardSettings field are considered, so ZERO_HOME
    and unrelated variables are left alone.
    """
    merged = dict(settings)
    for name in WizardSettings.model_fields:
        env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if env_value is not None:
            merged[name] = _parse_env_value(env_value)
    return merged


def load_settings(path: Path | None = None, skip_env: bool = False) -> WizardSettings:
    """
    Load and validate wizard settings.

    Args:
        path: Explicit settings file. A missing explicit file is an error;
            the default file is optional.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated WizardSettings.

    Raises:
        ConfigurationError: If a file is unreadable or values are invalid.
    """
    if path is not None:
        if not path.exists():
            raise ConfigurationError(f"Settings file not found: {path}")
        data = load_yaml_file(path)
    else:
        data = load_yaml_file(get_settings_path())

    if not skip_env:
        data = apply_env_overrides(data)

    try:
        settings = WizardSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e

    logger.debug(f"Loaded settings: {settings.model_dump()}")
    return settings
