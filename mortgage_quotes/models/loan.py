"""Loan parameter models: raw form input and validated parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ..utils.parsing import parse_number


class LoanParameters(BaseModel):
    """Raw loan inputs as entered by the user.

    Every field is optional; unparseable values are kept as ``None`` so the
    validator can report a user-facing error instead of failing here.
    """

    property_value: Optional[float] = Field(
        default=None, description="Purchase price / valuation of the property"
    )
    mortgage_amount: Optional[float] = Field(
        default=None, description="Amount the borrower wants to borrow"
    )
    term_years: Optional[float] = Field(
        default=None, description="Repayment term in whole years"
    )

    @field_validator("property_value", "mortgage_amount", "term_years", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return parse_number(value)


@dataclass(frozen=True)
class ValidParameters:
    """Loan parameters that passed validation."""

    property_value: float
    mortgage_amount: float
    term_years: int

    @property
    def deposit(self) -> float:
        return self.property_value - self.mortgage_amount

    @property
    def loan_to_value(self) -> float:
        """Mortgage amount as a percentage of the property value.

        Rounded to 4 places so ratios like 110k/200k compare equal to 55.
        """
        return round(self.mortgage_amount / self.property_value * 100, 4)
