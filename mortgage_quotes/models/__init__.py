from .loan import LoanParameters, ValidParameters
from .quote import Quote
from .calculator import (
    AmortizationResult,
    CalculatorPhase,
    CalculatorState,
    CalculatorViewModel,
    QuoteCard,
)

__all__ = [
    "LoanParameters",
    "ValidParameters",
    "Quote",
    "AmortizationResult",
    "CalculatorPhase",
    "CalculatorState",
    "CalculatorViewModel",
    "QuoteCard",
]
