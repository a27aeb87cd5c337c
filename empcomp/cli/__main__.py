"""emp-comp CLI - Command-line interface for employee compensation."""

import json

import click
import yaml
from rich.console import Console

from empcomp import __version__
from empcomp.sdk import (
    AuthManager,
    EmployeeRecord,
    FileSink,
    ProfileValidationError,
    SettingsError,
    calculate,
    calculate_batch,
    get_log_path,
    get_profile_path,
    get_prompt_defaults,
    load_profile,
    load_settings,
    report_hours,
)
from empcomp.sdk.logging_setup import configure_logging

from .renderers.report_renderer import render_report, render_roster, render_types
from .settings_commands import settings as settings_group


def _load_profile_or_fail():
    """Load profile.yaml, converting config errors to CLI errors."""
    try:
        return load_profile()
    except (ProfileValidationError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))


def _settings_or_fail(loader):
    """Call a settings.json reader, converting config errors to CLI errors."""
    try:
        return loader()
    except SettingsError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="emp-comp")
def cli():
    """emp-comp - Employee compensation calculator.

    Computes pay, rewards and stock options by employee type
    (FTE, PTE, Contractor, CLevel) and reports hours status.

    Configuration is loaded from (in order):

    \b
    1. EMP_COMP_CONFIG_PATH environment variable
    2. ~/.config/emp-comp/ (XDG default)
    """
    configure_logging()
    _settings_or_fail(load_settings)


cli.add_command(settings_group)


@cli.command("calc")
@click.option("--username", "-u", prompt="Username", help="Login identifier.")
@click.option("--password", "-p", prompt="Password", hide_input=True, help="Login secret.")
@click.option("--name", "-n", help="Employee full name (prompted if omitted).")
@click.option("--type", "-t", "employee_type", help="FTE / PTE / Contractor / CLevel (prompted if omitted).")
@click.option("--hours", "-h", type=float, help="Hours worked this period (prompted if omitted).")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON instead of a table.")
def calc(username, password, name, employee_type, hours, as_json):
    """Log in, calculate compensation for one employee, and log the result.

    Values not given as options are prompted for, with defaults from
    the roster entry for USERNAME (profile.yaml) or from settings.json.
    """
    profile = _load_profile_or_fail()
    sink = FileSink(get_log_path())
    auth = AuthManager(sink, profile)

    if not auth.login(username, password):
        raise click.ClickException("Login failed. Exiting...")

    current = auth.get_current_employee()
    defaults = _settings_or_fail(get_prompt_defaults)
    on_roster = username.strip() in profile.employees

    if name is None:
        name = click.prompt("Employee full name", default=current.display_name)
    if employee_type is None:
        type_default = current.classification if on_roster else defaults["type"]
        employee_type = click.prompt(
            "Enter employee type (FTE / PTE / Contractor / CLevel)",
            default=type_default,
        )
    if hours is None:
        hours_default = current.hours_worked if on_roster else defaults["hours"]
        hours = click.prompt("Enter hours worked this week", type=float, default=hours_default)

    current.display_name = name.strip() or current.display_name
    current.classification = employee_type.strip()
    current.hours_worked = hours

    result = calculate(current, sink=sink)
    summary = report_hours(current)

    if as_json:
        payload = result.model_dump(mode="json")
        payload["summary"] = summary
        click.echo(json.dumps(payload, indent=2))
    else:
        render_report(Console(), result, summary)

    auth.logout()


@cli.command("status")
@click.option("--hours", "-h", type=float, required=True, help="Hours worked this period.")
@click.option("--type", "-t", "employee_type", default="", help="Employee type label.")
def status(hours, employee_type):
    """Report the hours status band (Under target / On track / Overtime).

    Invalid hours (negative, nan, inf) are reported, not corrected.
    """
    click.echo(report_hours(EmployeeRecord(classification=employee_type, hours_worked=hours)))


@cli.command("types")
def types():
    """List employee types, accepted spellings and capabilities."""
    render_types(Console())


@cli.command("roster")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON instead of a table.")
def roster(as_json):
    """Calculate compensation for every employee in profile.yaml."""
    profile = _load_profile_or_fail()

    if not profile.employees:
        click.echo(f"No employees in profile: {get_profile_path()}")
        return

    employees = [
        EmployeeRecord(classification=entry.type, hours_worked=entry.hours, display_name=entry.name)
        for entry in profile.employees.values()
    ]
    results = calculate_batch(employees, sink=FileSink(get_log_path()))

    if as_json:
        click.echo(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    else:
        render_roster(Console(), results)


def main():
    cli()


if __name__ == "__main__":
    main()
