"""Employer (secondary Class 1) National Insurance."""

from .rates import EMPLOYER_NI_RATE, EMPLOYER_NI_THRESHOLD


def calculate_employer_ni(salary: float) -> float:
    """Calculate annual employer NI on a director's salary.

    Args:
        salary: Annual gross salary

    Returns:
        Employer NI due (0 at or below the secondary threshold)
    """
    if salary <= EMPLOYER_NI_THRESHOLD:
        return 0
    return (salary - EMPLOYER_NI_THRESHOLD) * EMPLOYER_NI_RATE
