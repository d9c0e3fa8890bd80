"""Tax-efficiency strategy estimates.

Strategies are data: each StrategyDescriptor names a saving formula from
SAVING_FORMULAS and an applicability rule, and optimise() evaluates every
descriptor the same way against a ScenarioResult. Adding a strategy means
adding a row to STRATEGIES.

Savings are priced at the scenario's marginal corporation tax rate. The
personal side uses a fixed higher dividend rate so estimates stay
comparable across tax years.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .schemas import ScenarioResult, Strategy
from .taxes.rates import CT_LOWER_LIMIT

PERSONAL_TAX_RATE = 0.3375
FLAT_RATE_HOME_ALLOWANCE = 312   # £6 per week


def _excess_profit(result: ScenarioResult) -> float:
    """Profit above the small profits limit."""
    return max(0, result.profit - CT_LOWER_LIMIT)


def _profit_banding_saving(descriptor: "StrategyDescriptor", result: ScenarioResult) -> float:
    return _excess_profit(result) * result.marginal_corporation_tax_rate


def _corporation_and_dividend_saving(descriptor: "StrategyDescriptor", result: ScenarioResult) -> float:
    cost = descriptor.cost_basis
    return cost * result.marginal_corporation_tax_rate + cost * PERSONAL_TAX_RATE


def _incremental_corporation_tax_saving(descriptor: "StrategyDescriptor", result: ScenarioResult) -> float:
    rate = result.marginal_corporation_tax_rate
    baseline_saving = descriptor.cost_basis * rate
    alternative_saving = descriptor.alternative_cost * rate
    return alternative_saving - baseline_saving


SAVING_FORMULAS: Dict[str, Callable[["StrategyDescriptor", ScenarioResult], float]] = {
    "profit_banding": _profit_banding_saving,
    "corporation_and_dividend": _corporation_and_dividend_saving,
    "incremental_corporation_tax": _incremental_corporation_tax_saving,
}


def _never(result: ScenarioResult) -> bool:
    return False


def _above_small_profits_limit(result: ScenarioResult) -> bool:
    return result.profit > CT_LOWER_LIMIT


def _topped_up_pension(result: ScenarioResult) -> float:
    # Top up the existing pension rather than replace it
    return _excess_profit(result) + result.pension


@dataclass(frozen=True)
class StrategyDescriptor:
    """Static definition of a strategy."""
    id: str
    title: str
    description: str
    saving_label: str
    formula: str
    cost_basis: float = 0
    alternative_cost: float = 0
    applicable: Callable[[ScenarioResult], bool] = _never
    pension_target: Optional[Callable[[ScenarioResult], float]] = None


STRATEGIES: List[StrategyDescriptor] = [
    StrategyDescriptor(
        id="pension",
        title="Optimise for 19% Tax Rate",
        description=(
            "Contribute the profit above £50,000 to pension so the company "
            "pays the small profits rate instead of the marginal relief band."
        ),
        saving_label="Corp Tax Saved",
        formula="profit_banding",
        applicable=_above_small_profits_limit,
        pension_target=_topped_up_pension,
    ),
    StrategyDescriptor(
        id="ev",
        title="Company Electric Car",
        description="Lease an EV (~£600/mo). 100% Corp Tax write-off + negligible BiK.",
        saving_label="Total Tax Efficiency / yr",
        formula="corporation_and_dividend",
        cost_basis=7_200,
    ),
    StrategyDescriptor(
        id="trivial",
        title="Trivial Benefits",
        description="Utilise your £300 annual director exemption for gift cards.",
        saving_label="Tax-free Extraction",
        formula="corporation_and_dividend",
        cost_basis=300,
    ),
    StrategyDescriptor(
        id="wfh",
        title="Formal Home Rent",
        description="Switch from the £6/wk flat rate to a formal rental agreement.",
        saving_label="Extra Corp Tax saved",
        formula="incremental_corporation_tax",
        cost_basis=FLAT_RATE_HOME_ALLOWANCE,
        alternative_cost=2_400,
    ),
    StrategyDescriptor(
        id="party",
        title="Annual Party (+1 Guest)",
        description="£150/head allowance. Treat yourself and a partner to a Christmas/Summer event.",
        saving_label="Tax-free value extracted",
        formula="corporation_and_dividend",
        cost_basis=2 * 150,
    ),
]


def evaluate_strategy(descriptor: StrategyDescriptor, result: ScenarioResult) -> Strategy:
    """Estimate one strategy against a scenario result."""
    saving = SAVING_FORMULAS[descriptor.formula](descriptor, result)
    applicable = descriptor.applicable(result)

    target: Optional[float] = None
    if applicable and descriptor.pension_target is not None:
        target = descriptor.pension_target(result)

    return Strategy(
        id=descriptor.id,
        title=descriptor.title,
        description=descriptor.description,
        saving_label=descriptor.saving_label,
        estimated_annual_saving=saving,
        applicable=applicable,
        applied_pension_target=target,
    )


def optimise(result: ScenarioResult) -> List[Strategy]:
    """Estimate every strategy for a scenario, in display order."""
    return [evaluate_strategy(descriptor, result) for descriptor in STRATEGIES]


def get_strategy(strategies: List[Strategy], strategy_id: str) -> Strategy:
    """Find a strategy by id.

    Raises:
        KeyError: If no strategy has that id
    """
    for strategy in strategies:
        if strategy.id == strategy_id:
            return strategy
    raise KeyError(f"Unknown strategy: {strategy_id}")
