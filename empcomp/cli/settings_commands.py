"""Settings CLI commands for emp-comp.

Manages settings.json - log file location and prompt defaults.
"""

import click
from pathlib import Path

from empcomp.sdk import (
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_settings_path,
    get_log_path,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - log_file: where calculation lines are appended
    - default_type: classification offered at the prompt
    - default_hours: hours offered at the prompt
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
    click.echo("Effective paths:")
    click.echo(f"  log_file: {get_log_path()}")


@settings.command("log-file")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom log_file, revert to default")
def settings_log_file(path, clear):
    """Set or clear the calculation log file.

    Examples:
        emp-comp settings log-file ~/payroll/logs.txt
        emp-comp settings log-file --clear
    """
    if clear:
        current = load_settings()
        if "log_file" in current:
            del current["log_file"]
            save_settings(current)
            click.echo("Cleared log_file setting.")
            click.echo(f"Log file is now: {get_log_path()} (default)")
        else:
            click.echo("log_file was not set.")
        return

    if not path:
        current_log_file = get_setting("log_file")
        if current_log_file:
            click.echo(f"Current log_file: {current_log_file}")
        else:
            click.echo(f"No custom log_file set. Using default: {get_log_path()}")
        return

    log_path = Path(path).expanduser().resolve()
    if log_path.is_dir():
        raise click.ClickException(f"Path is a directory: {log_path}")

    set_setting("log_file", str(log_path))
    click.echo(f"Set log_file: {log_path}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("defaults")
@click.option("--type", "employee_type", help="Default classification, e.g. FTE")
@click.option("--hours", type=float, help="Default hours worked")
def settings_defaults(employee_type, hours):
    """Set the classification and hours offered at the calc prompt."""
    if employee_type is None and hours is None:
        click.echo(f"default_type: {get_setting('default_type', '(unset)')}")
        click.echo(f"default_hours: {get_setting('default_hours', '(unset)')}")
        return

    current = load_settings()
    if employee_type is not None:
        current["default_type"] = employee_type
    if hours is not None:
        current["default_hours"] = hours
    save_settings(current)
    click.echo(f"Saved to: {get_settings_path()}")
