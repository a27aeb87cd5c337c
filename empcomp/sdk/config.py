"""Configuration management for emp-comp.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - log_file: where the calculation log is appended
   - default_type: classification offered at the CLI prompt
   - default_hours: hours offered at the CLI prompt

2. profile.yaml - Employee roster (optional)
   - employees: per-login defaults (name, classification, hours)

Config directory resolution:
1. EMP_COMP_CONFIG_PATH environment variable (if set)
2. ~/.config/emp-comp/ (XDG_CONFIG_HOME fallback)

Data paths follow the XDG spec:
- Data: XDG_DATA_HOME/emp-comp/ or ~/.local/share/emp-comp/
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .schemas import ProfileSchema


APP_NAME = "emp-comp"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"
LOG_FILENAME = "logs.txt"

DEFAULT_TYPE = "FTE"
DEFAULT_HOURS = 38.0


class ProfileValidationError(Exception):
    """Raised when profile.yaml does not match the expected schema."""
    pass


class SettingsError(Exception):
    """Raised when settings.json can't be parsed or holds a bad value."""
    pass


def get_config_dir() -> Path:
    """EMP_COMP_CONFIG_PATH if set, else $XDG_CONFIG_HOME/emp-comp."""
    override = os.environ.get("EMP_COMP_CONFIG_PATH")
    if override:
        return Path(override)
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def get_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Read settings.json; a missing file means no settings.

    Raises:
        SettingsError: If the file isn't a JSON object
    """
    path = get_settings_path()
    if not path.exists():
        return {}

    try:
        with open(path, "r") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid settings {path}: {e}") from e

    if not isinstance(settings, dict):
        raise SettingsError(f"Invalid settings {path}: expected a JSON object")
    return settings


def save_settings(settings: dict) -> Path:
    path = get_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(settings, f, indent=2)
    return path


def get_setting(key: str, default: Any = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Update one key in settings.json, keeping the rest."""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)



def get_profile_path() -> Path:
    """Get the path to profile.yaml in the config directory."""
    return get_config_dir() / PROFILE_FILENAME


def load_profile(path: Optional[Path] = None) -> ProfileSchema:
    """Load and validate the employee roster from profile.yaml.

    A missing file is not an error; it yields an empty roster.

    Args:
        path: Optional custom path (uses default if not specified)

    Returns:
        Validated ProfileSchema

    Raises:
        ProfileValidationError: If the file doesn't match the schema
        yaml.YAMLError: If the file isn't valid YAML
    """
    if path is None:
        path = get_profile_path()

    if not path.exists():
        return ProfileSchema()

    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    try:
        return ProfileSchema.model_validate(raw)
    except ValidationError as e:
        raise ProfileValidationError(f"Invalid profile {path}:\n{e}") from e


def save_profile(profile: ProfileSchema, path: Optional[Path] = None) -> Path:
    """Save the employee roster to profile.yaml.

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(
            profile.model_dump(exclude_none=True),
            f,
            default_flow_style=False,
            sort_keys=False,
        )

    return path


# =============================================================================
# XDG path helpers
# =============================================================================

def get_data_path() -> Path:
    """$XDG_DATA_HOME/emp-comp, created on first use."""
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    data_path = Path(base) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def get_log_path() -> Path:
    """settings.json "log_file" if set, else logs.txt in the data directory."""
    custom = get_setting("log_file")
    if custom:
        return Path(custom).expanduser()
    return get_data_path() / LOG_FILENAME


def get_prompt_defaults() -> Dict[str, Any]:
    """Get the classification and hours offered at the CLI prompt.

    Raises:
        SettingsError: If default_hours is not a number
    """
    settings = load_settings()
    hours = settings.get("default_hours", DEFAULT_HOURS)
    try:
        hours = float(hours)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"default_hours must be a number, got {hours!r}") from e
    return {
        "type": str(settings.get("default_type", DEFAULT_TYPE)),
        "hours": hours,
    }

