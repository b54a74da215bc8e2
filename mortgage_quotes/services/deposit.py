from __future__ import annotations

from typing import Optional


def derive_deposit(
    property_value: Optional[float], mortgage_amount: Optional[float]
) -> float:
    """Return the deposit implied by the inputs, never below zero.

    Missing inputs count as zero so the deposit can be shown while the form
    is still being filled in.
    """
    return max((property_value or 0.0) - (mortgage_amount or 0.0), 0.0)
