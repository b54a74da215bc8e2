import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_calculator
from ..exceptions import CalculatorStateError, QuoteNotFoundError
from ..models import CalculatorViewModel, LoanParameters
from ..services import MortgageCalculator


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/calculator",
    tags=["calculator"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=CalculatorViewModel)
async def read_calculator(
    calculator: MortgageCalculator = Depends(get_calculator),
):
    """Current render-ready calculator state."""
    return calculator.view_model()


@router.post("/parameters", response_model=CalculatorViewModel)
async def update_parameters(
    params: LoanParameters,
    calculator: MortgageCalculator = Depends(get_calculator),
):
    """Parameters changed: refresh the derived deposit without recalculating."""
    return calculator.update_parameters(params)


@router.post("/calculate", response_model=CalculatorViewModel)
async def calculate(
    params: LoanParameters,
    calculator: MortgageCalculator = Depends(get_calculator),
):
    """Calculate requested: validate, retrieve quotes and price the best one.

    Invalid input is reported in ``error_message`` rather than as an HTTP error.
    """
    return await calculator.calculate(params)


@router.post("/quotes/{quote_id}/select", response_model=CalculatorViewModel)
async def select_quote(
    quote_id: str,
    calculator: MortgageCalculator = Depends(get_calculator),
):
    """Quote selected: re-price the current results against ``quote_id``."""
    try:
        return calculator.select_quote(quote_id)
    except QuoteNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except CalculatorStateError as e:
        logger.info(f"Quote selection rejected: {e.message}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.delete("/results", response_model=CalculatorViewModel)
async def dismiss_results(
    calculator: MortgageCalculator = Depends(get_calculator),
):
    """Close the results panel."""
    return calculator.dismiss_results()
