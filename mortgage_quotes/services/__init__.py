from .amortization import amortize, calculate_monthly_payment
from .calculator import MortgageCalculator
from .deposit import derive_deposit
from .fallback_catalog import fallback_catalog_version, fallback_quotes
from .quote_client import QuoteClient
from .quote_normalizer import normalize_quotes
from .ranking import rank_quotes, resolve_ranked_quotes
from .validation import check_loan_parameters, validate_loan_parameters
from .view_model import to_view_model

__all__ = [
    "amortize",
    "calculate_monthly_payment",
    "MortgageCalculator",
    "derive_deposit",
    "fallback_catalog_version",
    "fallback_quotes",
    "QuoteClient",
    "normalize_quotes",
    "rank_quotes",
    "resolve_ranked_quotes",
    "check_loan_parameters",
    "validate_loan_parameters",
    "to_view_model",
]
