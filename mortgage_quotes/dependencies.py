"""Dependency helpers for FastAPI routes."""

from fastapi import HTTPException, Request, status

from .services import MortgageCalculator


def get_calculator(request: Request) -> MortgageCalculator:
    """Return the calculator owned by the running application."""
    calculator = getattr(request.app.state, "calculator", None)
    if calculator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Calculator is not initialised",
        )
    return calculator


__all__ = ["get_calculator"]
