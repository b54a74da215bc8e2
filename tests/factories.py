from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from mortgage_quotes.models import LoanParameters, Quote, ValidParameters


def build_quote(**overrides: Any) -> Quote:
    fields: Dict[str, Any] = {
        "id": "fixed-2y",
        "title": "2 Year Fixed",
        "interest_rate_percent": 4.5,
        "rate_type": "Fixed",
        "rate_period": "Fixed Rate until 31.03.27",
        "follow_on_rate": "6.94% Variable for remainder of term",
        "aprc_percent": 6.2,
        "product_fee": "£999",
        "max_loan_to_value_percent": 90.0,
        "early_repayment_charge": "Yes",
        "cta_text": "How to apply",
        "cta_link": "/apply/fixed-2y",
    }
    fields.update(overrides)
    return Quote(**fields)


def build_raw_quote(**overrides: Any) -> Dict[str, Any]:
    """A product as the remote quote source returns it."""
    item: Dict[str, Any] = {
        "id": "fixed-5y",
        "title": "5 Year Fixed",
        "interestRate": "4.20%",
        "rateType": "Fixed",
        "ratePeriod": "Fixed Rate until 31.03.30",
        "followOnRate": "6.94% Variable for remainder of term",
        "aprc": "5.9%",
        "productFee": "£0",
        "maxLoanToValue": "85%",
        "earlyRepaymentCharge": "Yes",
        "ctaText": "Apply now",
        "ctaLink": "/apply/fixed-5y",
        "features": ["Free valuation"],
    }
    item.update(overrides)
    return item


def build_parameters(
    property_value: Any = 250_000,
    mortgage_amount: Any = 200_000,
    term_years: Any = 25,
) -> LoanParameters:
    return LoanParameters(
        property_value=property_value,
        mortgage_amount=mortgage_amount,
        term_years=term_years,
    )


def build_valid_parameters(
    property_value: float = 250_000,
    mortgage_amount: float = 200_000,
    term_years: int = 25,
) -> ValidParameters:
    return ValidParameters(
        property_value=property_value,
        mortgage_amount=mortgage_amount,
        term_years=term_years,
    )


class FakeQuoteClient:
    """Stands in for ``QuoteClient``; optionally blocks until released."""

    def __init__(self, quotes: Optional[List[Quote]] = None, *, block: bool = False):
        self.quotes = quotes if quotes is not None else []
        self.calls: List[ValidParameters] = []
        self.release = asyncio.Event() if block else None

    async def fetch_quotes(self, params: ValidParameters) -> List[Quote]:
        self.calls.append(params)
        if self.release is not None:
            await self.release.wait()
        return list(self.quotes)


class ExplodingQuoteClient:
    async def fetch_quotes(self, params: ValidParameters) -> List[Quote]:
        raise RuntimeError("boom")
