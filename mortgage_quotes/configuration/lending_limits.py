"""Centralized loan-input limits and calculator defaults used across the service layer."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Input guardrails
# ---------------------------------------------------------------------------

# Upper bound for both the property value and the mortgage amount.
MAX_PROPERTY_VALUE: float = 1_000_000.0
MAX_MORTGAGE_AMOUNT: float = MAX_PROPERTY_VALUE

# Permitted term range in whole years.
MIN_TERM_YEARS: int = 1
MAX_TERM_YEARS: int = 40

MONTHS_PER_YEAR: int = 12

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------

MSG_INVALID_PROPERTY_VALUE = "Please enter a valid property value."
MSG_PROPERTY_VALUE_TOO_LARGE = "Property value cannot exceed £1,000,000."
MSG_INVALID_MORTGAGE_AMOUNT = "Please enter a valid mortgage amount."
MSG_MORTGAGE_AMOUNT_TOO_LARGE = "Mortgage amount cannot exceed £1,000,000."
MSG_MORTGAGE_EXCEEDS_PROPERTY = "Mortgage amount cannot exceed property value."
MSG_INVALID_TERM = "Please enter a valid mortgage term (1-40 years)."
MSG_GENERIC_FAILURE = "Unable to fetch mortgage options. Please try again."

# ---------------------------------------------------------------------------
# Quote placeholders
# ---------------------------------------------------------------------------

PLACEHOLDER = "N/A"
DEFAULT_CTA_TEXT = "How to apply"
DEFAULT_CTA_LINK = "#"

# ---------------------------------------------------------------------------
# Calculator defaults
# ---------------------------------------------------------------------------

# Annual rate used when no quote is available to price the loan.
DEFAULT_ANNUAL_RATE_PERCENT: float = 4.85
