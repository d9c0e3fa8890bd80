"""Profile CLI commands for ltd-calc.

Manages the user's default calculator inputs (profile.yaml).
"""

from pathlib import Path

import click
import yaml

from ltdcalc.sdk import (
    ProfileDefaults,
    ProfileValidationError,
    get_profile_path,
    load_profile,
    set_profile_value,
    set_setting,
    validate_profile,
)


def _parse_value(raw: str):
    """Parse a CLI value with YAML rules so numbers become numbers."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


@click.group()
def profile():
    """Manage default inputs (profile.yaml).

    Keys use dot notation for the pension section, e.g.:

    \b
    ltd-calc profile set daily_rate 550
    ltd-calc profile set pension.current_age 38
    """
    pass


@profile.command("show")
def profile_show():
    """Show the profile location and effective defaults."""
    path = get_profile_path(require_exists=False)
    click.echo(f"Profile file: {path}")
    click.echo(f"File exists: {path.exists()}")
    click.echo()

    try:
        raw = load_profile(require_exists=False)
        defaults = validate_profile(raw, path)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    if not raw:
        click.echo("No profile values set (using defaults).")
        click.echo()

    click.echo("Effective defaults:")
    click.echo(yaml.dump(defaults.model_dump(), default_flow_style=False, sort_keys=False).rstrip())


@profile.command("set")
@click.argument("key")
@click.argument("value")
def profile_set(key, value):
    """Set a profile value.

    KEY is a field name (e.g. daily_rate, tax_year, pension.growth_rate_percent).
    """
    top = key.split(".")[0]
    if top not in ProfileDefaults.model_fields:
        valid = ", ".join(ProfileDefaults.model_fields)
        raise click.BadParameter(f"Unknown key '{key}'. Valid keys: {valid}", param_hint="KEY")

    parsed = _parse_value(value)

    try:
        saved = set_profile_value(key, parsed)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {parsed}")
    click.echo(f"Saved to: {saved}")


@profile.command("use")
@click.argument("path", type=click.Path(dir_okay=False))
def profile_use(path):
    """Use a profile.yaml at a custom location.

    The file is validated before the setting is saved.
    """
    profile_path = Path(path).expanduser().resolve()
    if not profile_path.exists():
        raise click.ClickException(f"Profile file not found: {profile_path}")
    if profile_path.suffix not in (".yaml", ".yml"):
        raise click.ClickException(f"Profile must be a YAML file: {profile_path}")

    try:
        with open(profile_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid YAML in {profile_path}: {e}")

    if not isinstance(data, dict):
        raise click.ClickException(f"Profile must be a YAML dictionary, got {type(data).__name__}")

    try:
        validate_profile(data, profile_path)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    saved = set_setting("profile", str(profile_path))
    click.echo(f"Using profile: {profile_path}")
    click.echo(f"Saved to: {saved}")


@profile.command("path")
def profile_path_cmd():
    """Print the active profile path."""
    click.echo(str(get_profile_path(require_exists=False)))
