"""Fixed-rate monthly amortization."""

from __future__ import annotations

from typing import Optional

from ..configuration import lending_limits
from ..models import AmortizationResult
from ..utils.parsing import format_percent


def calculate_monthly_payment(
    loan_amount: float, monthly_rate: float, months: int
) -> float:
    """Calculate monthly payment using mortgage formula."""
    if loan_amount <= 0 or months <= 0:
        return 0.0
    if monthly_rate == 0:
        return loan_amount / months
    growth = (1 + monthly_rate) ** months
    return loan_amount * monthly_rate * growth / (growth - 1)


def amortize(
    mortgage_amount: float,
    term_years: int,
    annual_rate_percent: Optional[float] = None,
    *,
    rate_source: Optional[str] = None,
    default_rate_percent: float = lending_limits.DEFAULT_ANNUAL_RATE_PERCENT,
) -> AmortizationResult:
    """Compute monthly payment, total interest and total cost.

    When ``annual_rate_percent`` is ``None`` the default rate is used and the
    label says so. ``rate_source`` (usually the quote title) is appended to
    the label otherwise.
    """

    used_default = annual_rate_percent is None
    rate = default_rate_percent if used_default else annual_rate_percent

    monthly_rate = rate / 100 / lending_limits.MONTHS_PER_YEAR
    months = term_years * lending_limits.MONTHS_PER_YEAR

    monthly_payment = calculate_monthly_payment(mortgage_amount, monthly_rate, months)
    total_amount = monthly_payment * months
    total_interest = total_amount - mortgage_amount

    if used_default:
        label = f"{format_percent(rate)} (default rate)"
    elif rate_source:
        label = f"{format_percent(rate)} - {rate_source}"
    else:
        label = format_percent(rate)

    return AmortizationResult(
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_amount=total_amount,
        annual_rate_percent=rate,
        rate_used_label=label,
        used_default_rate=used_default,
    )
