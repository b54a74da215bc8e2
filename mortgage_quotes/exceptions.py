"""Custom exceptions for the application."""

from enum import Enum
from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationErrorKind(str, Enum):
    """Distinct reasons a set of loan parameters can be rejected."""

    MISSING_OR_INVALID_PROPERTY_VALUE = "missing_or_invalid_property_value"
    PROPERTY_VALUE_TOO_LARGE = "property_value_too_large"
    MISSING_OR_INVALID_MORTGAGE_AMOUNT = "missing_or_invalid_mortgage_amount"
    MORTGAGE_AMOUNT_TOO_LARGE = "mortgage_amount_too_large"
    MORTGAGE_EXCEEDS_PROPERTY = "mortgage_exceeds_property"
    INVALID_TERM = "invalid_term"


class LoanValidationError(AppException):
    """Exception raised when loan parameters fail validation.

    The message is user-facing and is shown verbatim by the widget.
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.kind = kind
        super().__init__(message, details)


class RetrievalError(AppException):
    """Exception raised when the remote quote source cannot be used."""

    pass


class QuoteNotFoundError(AppException):
    """Exception raised when a quote id is not in the ranked list."""

    pass


class CalculatorStateError(AppException):
    """Exception raised when an operation is not allowed in the current phase."""

    pass


class ConfigurationError(AppException):
    """Exception raised when configuration is invalid."""

    pass
