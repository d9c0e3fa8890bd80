"""Settings CLI commands for ltd-calc.

Manages settings.json - profile location and output preferences.
"""

import click

from ltdcalc.sdk import (
    load_settings,
    save_settings,
    set_setting,
    get_settings_path,
    get_profile_path,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - output_format: default output for calculator commands (text or json)
    - profile: path to profile.yaml (set via 'profile use')
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  output_format: {current.get('output_format', 'text')}")
    click.echo(f"  profile: {get_profile_path(require_exists=False)}")


@settings.command("format")
@click.argument("output_format", required=False, type=click.Choice(["text", "json"]))
@click.option("--clear", is_flag=True, help="Clear output_format, revert to text")
def settings_format(output_format, clear):
    """Set or clear the default output format.

    Examples:
        ltd-calc settings format json
        ltd-calc settings format --clear
    """
    if clear:
        current = load_settings()
        if "output_format" in current:
            del current["output_format"]
            save_settings(current)
            click.echo("Cleared output_format setting.")
        else:
            click.echo("output_format was not set.")
        return

    if not output_format:
        click.echo(f"Current output_format: {load_settings().get('output_format', 'text')}")
        return

    set_setting("output_format", output_format)
    click.echo(f"Set output_format: {output_format}")
    click.echo(f"Saved to: {get_settings_path()}")
