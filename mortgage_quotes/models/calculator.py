"""Calculator state, amortization results and the render-ready view model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .loan import LoanParameters, ValidParameters
from .quote import Quote


class CalculatorPhase(str, Enum):
    """Phases of one calculate / reselect cycle."""

    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    RETRIEVING = "retrieving"
    RANKED = "ranked"
    DISPLAYING = "displaying"
    RESELECTING = "reselecting"


@dataclass(frozen=True)
class AmortizationResult:
    """Level monthly payment over a fixed term at a fixed rate."""

    monthly_payment: float
    total_interest: float
    total_amount: float
    annual_rate_percent: float
    rate_used_label: str
    used_default_rate: bool = False


@dataclass
class CalculatorState:
    """Mutable state of one calculator instance."""

    parameters: LoanParameters = field(default_factory=LoanParameters)
    deposit: float = 0.0
    quotes: List[Quote] = field(default_factory=list)
    selected_quote: Optional[Quote] = None
    priced_parameters: Optional[ValidParameters] = None
    result: Optional[AmortizationResult] = None
    phase: CalculatorPhase = CalculatorPhase.IDLE
    last_error: Optional[str] = None
    is_retrieving: bool = False
    sequence: int = 0


class QuoteCard(BaseModel):
    """Display-ready representation of a single quote."""

    id: str
    title: str
    interest_rate: str
    rate_type: str
    rate_period: str
    follow_on_rate: str
    aprc: str
    product_fee: str
    max_loan_to_value: str
    early_repayment_charge: str
    cta_text: str
    cta_link: str
    features: List[str] = Field(default_factory=list)
    is_selected: bool = False


class CalculatorViewModel(BaseModel):
    """Everything the presentation layer needs to render the widget."""

    phase: CalculatorPhase
    is_loading: bool = False
    has_results: bool = False
    can_select: bool = False
    deposit: str
    monthly_payment: Optional[str] = None
    total_interest: Optional[str] = None
    total_amount: Optional[str] = None
    rate_used_label: Optional[str] = None
    selected_quote_id: Optional[str] = None
    quotes: List[QuoteCard] = Field(default_factory=list)
    error_message: Optional[str] = None
