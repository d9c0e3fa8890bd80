"""Pension pot projection.

Each year the opening balance grows at a fixed rate, then the year's
contribution is added:

    growth = balance * rate
    balance = balance + growth + contribution

The first year the closing balance reaches the milestone is flagged. Only
that year is flagged, even if the balance later dips and crosses again.
"""

import logging
from typing import List

from .schemas import PensionProjection, ProjectionRow

logger = logging.getLogger(__name__)

PROJECTION_YEARS = 25
MILLION_MILESTONE = 1_000_000


def project_pension(
    start_balance: float,
    annual_contribution: float,
    growth_rate_percent: float,
    start_age: float,
) -> PensionProjection:
    """Project pension pot growth over PROJECTION_YEARS years.

    Args:
        start_balance: Current pot value
        annual_contribution: Contribution added at the end of each year
        growth_rate_percent: Annual growth in percent (e.g., 5 for 5%)
        start_age: Age during year 1

    Returns:
        PensionProjection with one row per year
    """
    rate = growth_rate_percent / 100
    balance = start_balance
    milestone_year = None
    milestone_age = None
    rows: List[ProjectionRow] = []

    for year in range(1, PROJECTION_YEARS + 1):
        opening = balance
        growth = opening * rate
        balance = opening + growth + annual_contribution
        age = start_age + year - 1

        is_milestone = milestone_year is None and balance >= MILLION_MILESTONE
        if is_milestone:
            milestone_year = year
            milestone_age = age

        rows.append(ProjectionRow(
            year=year,
            age=age,
            contribution=annual_contribution,
            start_balance=opening,
            growth=growth,
            end_balance=balance,
            is_milestone_row=is_milestone,
        ))

    if milestone_year is not None:
        logger.debug(f"pension milestone reached in year {milestone_year} (age {milestone_age})")

    return PensionProjection(
        rows=rows,
        milestone=MILLION_MILESTONE,
        milestone_year=milestone_year,
        milestone_age=milestone_age,
    )
