"""ltd-calc CLI - Command-line interface for company take-home calculations."""

import json
import logging
import os

import click
from rich.console import Console

from ltdcalc import __version__
from ltdcalc.sdk import (
    ProfileValidationError,
    apply_pension_target,
    build_scenario_input,
    get_setting,
    get_strategy,
    load_profile_defaults,
    optimise,
    project_pension,
    run_scenario_input,
    run_scenario_set_for,
)
from ltdcalc.sdk.taxes import available_tax_years

from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group
from .renderers.report_renderer import (
    render_breakdown,
    render_comparison,
    render_projection,
    render_strategies,
)

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")

# Input options by mode, mapped to their flags for error messages
DAY_RATE_OPTIONS = {"daily_rate": "--day-rate", "holidays_taken": "--holidays", "monthly_pension": "--monthly-pension"}
ANNUAL_OPTIONS = {"annual_turnover": "--turnover", "annual_pension": "--annual-pension"}


def scenario_options(func):
    """Shared calculator input options.

    Every option defaults to None so unset options fall through to
    profile.yaml.
    """
    options = [
        click.option("--day-rate", "daily_rate", type=float, help="Day rate (day-rate mode)"),
        click.option("--holidays", "holidays_taken", type=float, help="Personal holidays taken (day-rate mode)"),
        click.option("--monthly-pension", type=float, help="Pension contribution per month (day-rate mode)"),
        click.option("--turnover", "annual_turnover", type=float, help="Annual turnover (annual mode)"),
        click.option("--annual-pension", type=float, help="Pension contribution per year (annual mode)"),
        click.option("--expenses", "yearly_expenses", type=float, help="Company expenses per year"),
        click.option("--tax-year", type=click.Choice(available_tax_years()), help="Tax year (2025 = 2025/26)"),
        click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS),
                     help="Output format (default: settings output_format, else text)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_defaults():
    try:
        return load_profile_defaults()
    except ProfileValidationError as e:
        raise click.ClickException(str(e))


def _scenario_input(defaults, **overrides):
    day_rate_given = [flag for key, flag in DAY_RATE_OPTIONS.items() if overrides.get(key) is not None]
    annual_given = [flag for key, flag in ANNUAL_OPTIONS.items() if overrides.get(key) is not None]
    if day_rate_given and annual_given:
        raise click.BadParameter(
            f"Day-rate options ({', '.join(day_rate_given)}) cannot be combined with "
            f"annual options ({', '.join(annual_given)})."
        )
    return build_scenario_input(defaults, **overrides)


def _output_format(requested):
    return requested or get_setting("output_format", "text")


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2))


@click.group()
@click.version_option(version=__version__, prog_name="ltd-calc")
def cli():
    """ltd-calc - Limited company take-home and tax efficiency calculator.

    Works out salary, dividends, corporation tax and employer NI for a
    one-person company, compares pension contribution levels and projects
    the pension pot.

    Inputs not given on the command line are taken from profile.yaml:

    \b
    1. settings.json 'profile' key (if set via 'ltd-calc profile use')
    2. ~/.config/ltd-calc/profile.yaml (or $LTD_CALC_CONFIG_PATH)

    Run 'ltd-calc profile show' to see the stored defaults.
    """
    pass


cli.add_command(profile_group)
cli.add_command(settings_group)


@cli.command("breakdown")
@scenario_options
def breakdown(output_format, **inputs):
    """Show the detailed breakdown for your inputs.

    Company profit, corporation tax, dividend tax by band, net cash and
    total tax paid.
    """
    scenario_input = _scenario_input(_load_defaults(), **inputs)
    result = run_scenario_input(scenario_input)

    if _output_format(output_format) == "json":
        _echo_json({"input": scenario_input.model_dump(), "result": result.model_dump()})
        return

    render_breakdown(Console(), scenario_input, result)


@cli.command("compare")
@scenario_options
def compare(output_format, **inputs):
    """Compare preset pension levels against your pension input.

    Presets are no pension, £18k, £21k and £24k per year.
    """
    scenario_input = _scenario_input(_load_defaults(), **inputs)
    scenarios = run_scenario_set_for(scenario_input)

    if _output_format(output_format) == "json":
        _echo_json({"input": scenario_input.model_dump(), "scenarios": scenarios.model_dump()})
        return

    render_comparison(Console(), scenarios)


@cli.command("project")
@scenario_options
@click.option("--start-balance", type=float, help="Current pension pot")
@click.option("--age", "current_age", type=float, help="Current age")
@click.option("--growth", "growth_rate_percent", type=float, help="Annual growth rate, percent (e.g. 5)")
def project(output_format, start_balance, current_age, growth_rate_percent, **inputs):
    """Project pension pot growth over 25 years.

    The annual contribution is the pension from your calculator inputs.
    The first year the pot reaches £1,000,000 is highlighted.
    """
    defaults = _load_defaults()
    scenario_input = _scenario_input(defaults, **inputs)
    pension = defaults.pension

    projection = project_pension(
        start_balance if start_balance is not None else pension.start_balance,
        scenario_input.annual_pension,
        growth_rate_percent if growth_rate_percent is not None else pension.growth_rate_percent,
        current_age if current_age is not None else pension.current_age,
    )

    if _output_format(output_format) == "json":
        _echo_json(projection.model_dump())
        return

    render_projection(Console(), projection)


@cli.command("optimise")
@scenario_options
@click.option("--apply", "apply_id", help="Apply a strategy's pension target and show the new comparison")
def optimise_cmd(output_format, apply_id, **inputs):
    """Estimate savings from common tax-efficiency strategies.

    Savings are priced at the marginal corporation tax rate of your
    current profit.
    """
    scenario_input = _scenario_input(_load_defaults(), **inputs)
    result = run_scenario_input(scenario_input)
    strategies = optimise(result)
    fmt = _output_format(output_format)

    if apply_id:
        try:
            strategy = get_strategy(strategies, apply_id)
        except KeyError as e:
            raise click.BadParameter(str(e.args[0]), param_hint="--apply")
        if not strategy.applicable:
            raise click.ClickException(f"Strategy '{apply_id}' cannot be applied to these inputs.")

        applied = apply_pension_target(scenario_input, strategy.applied_pension_target)
        logger.info(f"applied {apply_id}: pension {scenario_input.annual_pension} -> {applied.annual_pension}")
        scenarios = run_scenario_set_for(applied)

        if fmt == "json":
            _echo_json({
                "strategy": strategy.model_dump(),
                "input": applied.model_dump(),
                "scenarios": scenarios.model_dump(),
            })
            return

        console = Console()
        console.print(f"Applied '{strategy.title}': annual pension now {applied.annual_pension:,.0f}")
        render_comparison(console, scenarios)
        return

    if fmt == "json":
        _echo_json({
            "marginal_corporation_tax_rate": result.marginal_corporation_tax_rate,
            "strategies": [s.model_dump() for s in strategies],
        })
        return

    render_strategies(Console(), result, strategies)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
