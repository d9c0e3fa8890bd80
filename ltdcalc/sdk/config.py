"""Configuration management for ltd-calc.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - profile: path to profile.yaml (optional, if not colocated)
   - output_format: default CLI output ('text' or 'json')

2. profile.yaml - The user's default calculator inputs
   - income_mode, daily_rate, holidays_taken, monthly_pension
   - annual_turnover, annual_pension, yearly_expenses, tax_year
   - pension: start_balance, current_age, growth_rate_percent

Tax rates are never read from configuration; they are built in.

Config directory resolution:
1. LTD_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/ltd-calc/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set via CLI)
2. profile.yaml in same config directory
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .inputs import from_annual_turnover, from_day_rate
from .schemas import ProfileDefaults, ScenarioInput

logger = logging.getLogger(__name__)

APP_NAME = "ltd-calc"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class ProfileValidationError(Exception):
    """Raised when profile.yaml is unreadable YAML or does not match ProfileDefaults."""

    def __init__(self, path: Path, error: Union[ValidationError, yaml.YAMLError, str]):
        self.path = path
        self.error = error
        super().__init__(f"Invalid profile {path}:\n{error}")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. LTD_CALC_CONFIG_PATH environment variable
    2. ~/.config/ltd-calc/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("LTD_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json."""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: ltd-calc profile use /path/to/profile.yaml"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found. Checked:\n"
            f"  1. settings.json 'profile' key (not set)\n"
            f"  2. {profile_path} (not found)\n\n"
            f"Create one with: ltd-calc profile set daily_rate 500"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load the raw profile dictionary from profile.yaml.

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
        ProfileValidationError: If the file is not valid YAML or not a mapping
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        try:
            profile = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ProfileValidationError(profile_path, e)

    if not isinstance(profile, dict):
        raise ProfileValidationError(
            profile_path, f"profile must be a YAML mapping, got {type(profile).__name__}"
        )
    return profile


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save the profile dictionary to profile.yaml.

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def get_profile_value(key: str, default: Any = None) -> Any:
    """Get a profile value by dot-notation key (e.g., "pension.current_age")."""
    value = load_profile(require_exists=False)

    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key.

    The updated profile is validated before it is written, so a bad key
    or value never reaches disk.

    Raises:
        ProfileValidationError: If the result does not match ProfileDefaults
    """
    profile = load_profile(require_exists=False)

    parts = key.split(".")
    current = profile
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value

    path = get_profile_path(require_exists=False)
    validate_profile(profile, path)
    return save_profile(profile, path)


def validate_profile(profile: Dict[str, Any], path: Optional[Path] = None) -> ProfileDefaults:
    """Validate a profile dictionary against ProfileDefaults.

    Raises:
        ProfileValidationError: If validation fails
    """
    try:
        return ProfileDefaults.model_validate(profile)
    except ValidationError as e:
        raise ProfileValidationError(path or get_profile_path(), e)


def load_profile_defaults() -> ProfileDefaults:
    """Load and validate profile.yaml, falling back to built-in defaults.

    Raises:
        ProfileValidationError: If profile.yaml exists but is invalid
    """
    path = get_profile_path(require_exists=False)
    profile = load_profile(require_exists=False)
    if not profile:
        logger.debug(f"no profile at {path}, using defaults")
    return validate_profile(profile, path)


def build_scenario_input(
    defaults: Optional[ProfileDefaults] = None,
    **overrides: Any,
) -> ScenarioInput:
    """Combine profile defaults with explicit overrides into a ScenarioInput.

    Overrides with a value of None are ignored. Supplying a turnover or
    annual pension switches to annual mode; supplying a day rate, holidays
    or monthly pension switches to day-rate mode.

    Args:
        defaults: Profile defaults (loaded from profile.yaml if None)
        **overrides: Any ProfileDefaults top-level field

    Returns:
        ScenarioInput built by the matching input constructor
    """
    if defaults is None:
        defaults = load_profile_defaults()

    values = defaults.model_dump(exclude={"pension"})
    given = {k: v for k, v in overrides.items() if v is not None}
    values.update(given)

    if "income_mode" not in given:
        if given.keys() & {"annual_turnover", "annual_pension"}:
            values["income_mode"] = "annual"
        elif given.keys() & {"daily_rate", "holidays_taken", "monthly_pension"}:
            values["income_mode"] = "day_rate"

    if values["income_mode"] == "annual":
        return from_annual_turnover(
            values["annual_turnover"],
            values["annual_pension"],
            values["yearly_expenses"],
            values["tax_year"],
        )

    return from_day_rate(
        values["daily_rate"],
        values["holidays_taken"],
        values["monthly_pension"],
        values["yearly_expenses"],
        values["tax_year"],
    )
