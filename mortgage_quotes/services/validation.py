"""Input validation for calculator loan parameters."""

from __future__ import annotations

from typing import Optional

from ..configuration import lending_limits
from ..exceptions import LoanValidationError, ValidationErrorKind
from ..models import LoanParameters, ValidParameters


def validate_loan_parameters(params: LoanParameters) -> ValidParameters:
    """Validate raw inputs, stopping at the first failing check.

    Raises ``LoanValidationError`` whose message is shown to the user as-is.
    """

    property_value = params.property_value
    mortgage_amount = params.mortgage_amount
    term_years = params.term_years

    if property_value is None or property_value <= 0:
        raise LoanValidationError(
            ValidationErrorKind.MISSING_OR_INVALID_PROPERTY_VALUE,
            lending_limits.MSG_INVALID_PROPERTY_VALUE,
        )
    if property_value > lending_limits.MAX_PROPERTY_VALUE:
        raise LoanValidationError(
            ValidationErrorKind.PROPERTY_VALUE_TOO_LARGE,
            lending_limits.MSG_PROPERTY_VALUE_TOO_LARGE,
            {"property_value": property_value},
        )

    if mortgage_amount is None or mortgage_amount <= 0:
        raise LoanValidationError(
            ValidationErrorKind.MISSING_OR_INVALID_MORTGAGE_AMOUNT,
            lending_limits.MSG_INVALID_MORTGAGE_AMOUNT,
        )
    if mortgage_amount > lending_limits.MAX_MORTGAGE_AMOUNT:
        raise LoanValidationError(
            ValidationErrorKind.MORTGAGE_AMOUNT_TOO_LARGE,
            lending_limits.MSG_MORTGAGE_AMOUNT_TOO_LARGE,
            {"mortgage_amount": mortgage_amount},
        )

    if mortgage_amount > property_value:
        raise LoanValidationError(
            ValidationErrorKind.MORTGAGE_EXCEEDS_PROPERTY,
            lending_limits.MSG_MORTGAGE_EXCEEDS_PROPERTY,
            {"property_value": property_value, "mortgage_amount": mortgage_amount},
        )

    if (
        term_years is None
        or not float(term_years).is_integer()
        or not lending_limits.MIN_TERM_YEARS
        <= term_years
        <= lending_limits.MAX_TERM_YEARS
    ):
        raise LoanValidationError(
            ValidationErrorKind.INVALID_TERM,
            lending_limits.MSG_INVALID_TERM,
            {"term_years": term_years},
        )

    return ValidParameters(
        property_value=property_value,
        mortgage_amount=mortgage_amount,
        term_years=int(term_years),
    )


def check_loan_parameters(params: LoanParameters) -> Optional[LoanValidationError]:
    """Return the first validation error, or ``None`` when the inputs are valid."""
    try:
        validate_loan_parameters(params)
    except LoanValidationError as exc:
        return exc
    return None
