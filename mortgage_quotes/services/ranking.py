"""Eligibility filtering and rate ranking of quotes."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..models import Quote
from .fallback_catalog import fallback_quotes

logger = logging.getLogger(__name__)


def is_eligible(quote: Quote, loan_to_value: float) -> bool:
    """A quote without an LTV ceiling is unrestricted."""
    ceiling = quote.max_loan_to_value_percent
    return ceiling is None or loan_to_value <= ceiling


def _rate_key(quote: Quote) -> tuple[int, float]:
    # Quotes without a rate sort after every priced quote.
    if quote.interest_rate_percent is None:
        return (1, 0.0)
    return (0, quote.interest_rate_percent)


def rank_quotes(quotes: Sequence[Quote], loan_to_value: float) -> List[Quote]:
    """Drop quotes the LTV exceeds and order the rest by rate, lowest first.

    ``sorted`` is stable, so equal rates keep their input order.
    """
    eligible = [quote for quote in quotes if is_eligible(quote, loan_to_value)]
    return sorted(eligible, key=_rate_key)


def resolve_ranked_quotes(
    quotes: Sequence[Quote],
    loan_to_value: float,
    fallback: Optional[Callable[[], List[Quote]]] = None,
) -> List[Quote]:
    """Rank ``quotes``; when nothing is eligible, rank the fallback catalog instead."""

    ranked = rank_quotes(quotes, loan_to_value)
    if ranked:
        return ranked

    logger.info(
        "No eligible quotes at LTV %.2f%% out of %d; using fallback catalog",
        loan_to_value,
        len(quotes),
    )
    return rank_quotes((fallback or fallback_quotes)(), loan_to_value)
