"""Rich renderers for scenario, projection and strategy output.

Transforms SDK models into formatted Rich tables. No calculation happens
here beyond picking labels.
"""

from typing import List

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ltdcalc.sdk import (
    PensionProjection,
    ScenarioInput,
    ScenarioResult,
    ScenarioSet,
    Strategy,
)
from ltdcalc.sdk.strategies import FLAT_RATE_HOME_ALLOWANCE
from ltdcalc.sdk.taxes import CT_LOWER_LIMIT, CT_MAIN_RATE, DIVIDEND_ALLOWANCE, TOTAL_WORKING_DAYS

from .formatting import format_currency, format_percentage, format_thousands

SCENARIO_LABELS = {
    "no_pension": "No Pension",
    "pension_18k": "£1.5k / mo",
    "pension_21k": "£1.75k / mo",
    "pension_24k": "£2.0k / mo",
    "custom": "Your Input",
}

# The 21k preset is calculated but left out of the terminal table
COMPARISON_ROWS = ("no_pension", "pension_18k", "pension_24k", "custom")


def corporation_tax_label(result: ScenarioResult) -> str:
    """Corporation tax line label for the result's band."""
    rate = result.corporation_tax_effective_rate
    if result.corporation_tax_band == "small_profits":
        return f"Corporation Tax @ {format_percentage(rate)}"
    if result.corporation_tax_band == "main_rate":
        return "Corporation Tax @ 25%"
    return f"Corporation Tax (Marginal Relief) @ {format_percentage(rate, places=2)}"


def _section(title: str) -> Table:
    table = Table(title=title, title_justify="left", title_style="bold",
                  show_header=False, box=box.SIMPLE, expand=False)
    table.add_column("item", min_width=42)
    table.add_column("amount", justify="right", min_width=12)
    return table


def render_breakdown(console: Console, scenario_input: ScenarioInput, result: ScenarioResult) -> None:
    """Render the detailed breakdown of one scenario."""
    inputs = _section("Inputs")
    if scenario_input.income_mode == "day_rate":
        inputs.add_row("Total Working Days Available", str(TOTAL_WORKING_DAYS))
        inputs.add_row("Holidays Taken", f"{scenario_input.holidays_taken or 0:g}")
        inputs.add_row("Actual Days Worked", f"[bold]{scenario_input.working_days or 0:g}[/bold]")
        inputs.add_row("Daily Rate", format_currency(scenario_input.daily_rate))
    inputs.add_row("[bold]Annual Turnover[/bold]", f"[bold]{format_currency(result.turnover)}[/bold]")
    inputs.add_row("Tax Year", f"{result.tax_year}/{str(int(result.tax_year) + 1)[-2:]}")
    console.print(inputs)

    company = _section("Company Calculations")
    company.add_row("Annual Turnover", format_currency(result.turnover))
    company.add_row("Less: Director Salary", f"-{format_currency(result.salary)}")
    company.add_row("Less: Employer NI", f"-{format_currency(result.employer_ni)}")
    company.add_row("Less: Employer Pension", f"-{format_currency(result.pension)}")
    company.add_row("Less: Expenses", f"-{format_currency(result.yearly_expenses)}")
    company.add_row("[bold]Taxable Company Profit[/bold]", f"[bold]{format_currency(result.profit)}[/bold]")
    if result.profit > CT_LOWER_LIMIT:
        company.add_row(
            "[dim]Corporation Tax @ 25% (Comparison Only)[/dim]",
            f"[dim]-{format_currency(result.profit * CT_MAIN_RATE)}[/dim]",
        )
    company.add_row(corporation_tax_label(result), f"-{format_currency(result.corporation_tax)}")
    company.add_row("[bold]Profit After Tax (Dividends)[/bold]",
                    f"[bold]{format_currency(result.after_tax_profit)}[/bold]")
    console.print(company)

    personal = _section("Personal Taxation")
    personal.add_row("Director Salary", format_currency(result.salary))
    personal.add_row("Income Tax", format_currency(0))
    personal.add_row("Employee NI", format_currency(0))
    personal.add_row("[bold]Net Salary[/bold]", f"[bold]{format_currency(result.salary)}[/bold]")
    console.print(personal)

    dividends = _section("Dividend Taxation")
    dividends.add_row("Dividend Available", format_currency(result.after_tax_profit))
    dividends.add_row("Dividend Allowance", format_currency(DIVIDEND_ALLOWANCE))
    dividends.add_row("Taxable in Basic Band", format_currency(result.basic_band_dividend))
    dividends.add_row(f"Basic Tax @ {format_percentage(result.basic_dividend_rate, places=2)}",
                      f"-{format_currency(result.basic_band_tax)}")
    dividends.add_row("Taxable in Higher Band", format_currency(result.higher_band_dividend))
    dividends.add_row(f"Higher Tax @ {format_percentage(result.higher_dividend_rate, places=2)}",
                      f"-{format_currency(result.higher_band_tax)}")
    dividends.add_row("[bold]Total Dividend Tax[/bold]", f"[bold]-{format_currency(result.total_dividend_tax)}[/bold]")
    dividends.add_row("[bold]Net Dividend[/bold]", f"[bold]{format_currency(result.net_dividend)}[/bold]")
    console.print(dividends)

    summary = _section("Final Summary")
    summary.add_row("Net Salary", format_currency(result.salary))
    summary.add_row("Net Dividend", format_currency(result.net_dividend))
    summary.add_row("[bold]Total Annual Net (Cash)[/bold]", f"[bold]{format_currency(result.annual_net_cash)}[/bold]")
    summary.add_row("[bold]Total Monthly Net (Cash)[/bold]", f"[bold]{format_currency(result.monthly_net_cash)}[/bold]")
    summary.add_row("Plus: Annual Pension", format_currency(result.pension))
    summary.add_row("[bold]Total Annual Value[/bold]", f"[bold]{format_currency(result.total_annual_value)}[/bold]")
    console.print(summary)

    paid = _section("Tax Paid")
    paid.add_row("Corporation Tax", format_currency(result.corporation_tax))
    paid.add_row("Employer NI", format_currency(result.employer_ni))
    paid.add_row("Dividend Tax", format_currency(result.total_dividend_tax))
    paid.add_row("[bold]Total Tax & NI[/bold]", f"[bold]{format_currency(result.total_tax_and_ni)}[/bold]")
    paid.add_row("[bold]Effective Tax Rate[/bold]", f"[bold]{format_percentage(result.effective_tax_rate)}[/bold]")
    console.print(paid)


def render_comparison(console: Console, scenarios: ScenarioSet) -> None:
    """Render the dashboard and the pension scenario comparison table."""
    custom = scenarios.custom

    dashboard = Table(show_header=True, header_style="bold", box=box.ROUNDED)
    for label in ("Net Annual", "Net Monthly", "Annual Pension", "Effective Tax"):
        dashboard.add_column(label, justify="right")
    dashboard.add_row(
        f"[bold cyan]{format_currency(custom.annual_net_cash)}[/bold cyan]",
        format_currency(custom.monthly_net_cash),
        format_currency(custom.pension),
        format_percentage(custom.effective_tax_rate),
    )
    console.print(dashboard)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Scenario", style="cyan")
    table.add_column("Pension (Yr)", justify="right")
    table.add_column("Net Monthly", justify="right", style="green")
    table.add_column("Net Annual", justify="right")
    table.add_column("Total Value", justify="right")
    table.add_column("Eff. Tax", justify="right")

    results = dict(scenarios.rows())
    for key in COMPARISON_ROWS:
        result = results[key]
        table.add_row(
            SCENARIO_LABELS[key],
            format_currency(result.pension),
            format_currency(result.monthly_net_cash),
            format_currency(result.annual_net_cash),
            format_currency(result.total_annual_value),
            format_percentage(result.effective_tax_rate),
            style="bold" if key == "custom" else None,
        )

    console.print(table)


def render_projection(console: Console, projection: PensionProjection) -> None:
    """Render the year-by-year pension projection, milestone row highlighted."""
    contribution = projection.rows[0].contribution if projection.rows else 0

    table = Table(
        title=f"Projection (Contributing {format_currency(contribution)}/yr)",
        title_justify="left",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Age", justify="right")
    table.add_column("Contribution", justify="right")
    table.add_column("Growth", justify="right")
    table.add_column("Total Pot", justify="right")

    for row in projection.rows:
        table.add_row(
            f"{row.age:g}",
            format_currency(row.contribution),
            format_currency(row.growth),
            format_currency(row.end_balance),
            style="bold yellow" if row.is_milestone_row else None,
        )

    console.print(table)

    if projection.milestone_year is not None:
        console.print(
            f"Pot reaches {format_currency(projection.milestone)} in year "
            f"{projection.milestone_year} (age {projection.milestone_age:g}).",
            style="yellow",
        )


def _strategy_description(strategy: Strategy, result: ScenarioResult) -> str:
    if strategy.id == "wfh":
        flat_rate_saving = FLAT_RATE_HOME_ALLOWANCE * result.marginal_corporation_tax_rate
        return (
            f"Switch from the £6/wk flat rate (saves {format_currency(flat_rate_saving)}/yr) "
            f"to a formal rental agreement."
        )
    if strategy.id != "pension":
        return strategy.description
    if not strategy.applicable:
        return (
            "Great job! Your profit is already at or below £50,000, ensuring you "
            "pay the lowest Corporation Tax rate (19%)."
        )
    needed = strategy.applied_pension_target - result.pension
    return (
        f"Contribute an extra {format_thousands(needed)} to pension to bring profit "
        f"down to £50k. This avoids the "
        f"{format_percentage(result.marginal_corporation_tax_rate)} marginal tax on that excess."
    )


def render_strategies(console: Console, result: ScenarioResult, strategies: List[Strategy]) -> None:
    """Render strategy cards with the marginal rate they are priced at."""
    console.print(
        f"Efficiency Opportunities  [dim]Based on Marginal Rate: "
        f"{format_percentage(result.marginal_corporation_tax_rate)}[/dim]"
    )

    for strategy in strategies:
        body = Table(show_header=False, box=None, padding=(0, 1))
        body.add_column("text")
        body.add_row(_strategy_description(strategy, result))
        body.add_row(
            f"[dim]{strategy.saving_label}[/dim]  "
            f"[bold green]+{format_currency(strategy.estimated_annual_saving)}[/bold green]"
        )
        if strategy.applicable:
            body.add_row(
                f"[cyan]Apply with: --apply {strategy.id} "
                f"(pension {format_currency(strategy.applied_pension_target)}/yr)[/cyan]"
            )
        console.print(Panel(body, title=strategy.title, title_align="left", border_style="dim"))

    console.print(
        "[dim]The value shown is the total tax saved (Corporation + Personal) "
        "compared to taking the money as dividends.[/dim]"
    )
