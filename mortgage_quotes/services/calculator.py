"""Selection state machine for one mortgage calculator widget.

A ``MortgageCalculator`` is constructed explicitly and owns its
``CalculatorState``; nothing else mutates it. The presentation layer drives
it through three events: parameters changed, calculate requested and quote
selected.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Mapping, Optional, Union

from ..config import settings
from ..configuration.lending_limits import MSG_GENERIC_FAILURE
from ..exceptions import CalculatorStateError, LoanValidationError, QuoteNotFoundError
from ..models import (
    AmortizationResult,
    CalculatorPhase,
    CalculatorState,
    CalculatorViewModel,
    LoanParameters,
    Quote,
    ValidParameters,
)
from .amortization import amortize
from .deposit import derive_deposit
from .fallback_catalog import fallback_quotes
from .quote_client import QuoteClient
from .ranking import resolve_ranked_quotes
from .validation import validate_loan_parameters
from .view_model import to_view_model

logger = logging.getLogger(__name__)

ParametersInput = Union[LoanParameters, Mapping[str, Any]]


def _coerce_parameters(params: ParametersInput) -> LoanParameters:
    if isinstance(params, LoanParameters):
        return params
    return LoanParameters.model_validate(dict(params))


class MortgageCalculator:
    """Validates, retrieves, ranks and prices quotes for one widget instance."""

    def __init__(
        self,
        quote_client: Optional[QuoteClient] = None,
        *,
        fallback: Callable[[], List[Quote]] = fallback_quotes,
        default_rate_percent: Optional[float] = None,
        currency_symbol: Optional[str] = None,
    ):
        self._client = quote_client or QuoteClient(fallback=fallback)
        self._fallback = fallback
        self._default_rate_percent = (
            default_rate_percent
            if default_rate_percent is not None
            else settings.default_annual_rate_percent
        )
        self._currency_symbol = currency_symbol or settings.currency_symbol
        self._state = CalculatorState()
        self._retrieval: Optional[asyncio.Task] = None

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state.is_retrieving

    @property
    def can_select(self) -> bool:
        """A completed ranked cycle exists and no retrieval is in flight."""
        return self._state.priced_parameters is not None and not self._state.is_retrieving

    def view_model(self) -> CalculatorViewModel:
        return to_view_model(self._state, self._currency_symbol)

    def update_parameters(self, params: ParametersInput) -> CalculatorViewModel:
        """Record new raw inputs and refresh the derived deposit."""
        parameters = _coerce_parameters(params)
        self._state.parameters = parameters
        self._state.deposit = derive_deposit(
            parameters.property_value, parameters.mortgage_amount
        )
        return self.view_model()

    async def calculate(
        self, params: Optional[ParametersInput] = None
    ) -> CalculatorViewModel:
        """Run a full validate / retrieve / rank / price cycle.

        A request arriving while a retrieval is in flight supersedes it: the
        older retrieval is cancelled and its outcome discarded.
        """

        if params is not None:
            self.update_parameters(params)

        state = self._state
        state.sequence += 1
        sequence = state.sequence
        self._cancel_in_flight()

        state.phase = CalculatorPhase.VALIDATING
        try:
            valid = validate_loan_parameters(state.parameters)
        except LoanValidationError as exc:
            logger.info("Loan parameters rejected: %s", exc.kind.value)
            state.is_retrieving = False
            state.last_error = exc.message
            state.phase = CalculatorPhase.INVALID
            return self.view_model()

        state.last_error = None
        state.phase = CalculatorPhase.RETRIEVING
        state.is_retrieving = True

        retrieval = asyncio.ensure_future(self._client.fetch_quotes(valid))
        self._retrieval = retrieval
        try:
            quotes = await retrieval
        except asyncio.CancelledError:
            if sequence != state.sequence:
                logger.debug("Retrieval %d superseded by %d", sequence, state.sequence)
                return self.view_model()
            state.is_retrieving = False
            state.phase = (
                CalculatorPhase.DISPLAYING if state.result else CalculatorPhase.IDLE
            )
            raise
        except Exception:
            if sequence != state.sequence:
                return self.view_model()
            logger.exception("Unexpected failure while retrieving quotes")
            self._fail()
            return self.view_model()
        finally:
            if self._retrieval is retrieval:
                self._retrieval = None

        if sequence != state.sequence:
            logger.debug("Discarding stale retrieval %d", sequence)
            return self.view_model()

        try:
            self._publish_ranked(valid, quotes)
        except Exception:
            logger.exception("Unexpected failure while ranking or pricing quotes")
            self._fail()
        return self.view_model()

    def select_quote(self, quote_id: str) -> CalculatorViewModel:
        """Re-price the last ranked results against another quote.

        Allowed after a rejected recalculation too; the results shown are
        those of the last completed cycle.
        """

        state = self._state
        if not self.can_select:
            raise CalculatorStateError(
                f"Cannot select a quote while {state.phase.value}",
                {"phase": state.phase.value},
            )
        quote = next((q for q in state.quotes if q.id == quote_id), None)
        if quote is None:
            raise QuoteNotFoundError(
                f"Quote {quote_id} is not among the current results",
                {"quote_id": quote_id},
            )

        params = state.priced_parameters
        state.phase = CalculatorPhase.RESELECTING
        state.last_error = None
        state.selected_quote = quote
        state.result = self._amortize(params, quote)
        state.phase = CalculatorPhase.DISPLAYING
        logger.info("Quote %s selected", quote_id)
        return self.view_model()

    def dismiss_results(self) -> CalculatorViewModel:
        """Hide published results; inputs and deposit are kept."""
        self._cancel_in_flight()
        state = self._state
        state.sequence += 1
        state.quotes = []
        state.selected_quote = None
        state.priced_parameters = None
        state.result = None
        state.last_error = None
        state.is_retrieving = False
        state.phase = CalculatorPhase.IDLE
        return self.view_model()

    def _publish_ranked(self, params: ValidParameters, quotes: List[Quote]) -> None:
        state = self._state
        ranked = resolve_ranked_quotes(quotes, params.loan_to_value, self._fallback)
        state.quotes = ranked
        state.priced_parameters = params
        state.selected_quote = ranked[0] if ranked else None
        state.is_retrieving = False
        state.phase = CalculatorPhase.RANKED

        state.result = self._amortize(params, state.selected_quote)
        state.phase = CalculatorPhase.DISPLAYING
        logger.info(
            "Calculated %d quotes at LTV %.2f%%, selected %s",
            len(ranked),
            params.loan_to_value,
            state.selected_quote.id if state.selected_quote else "none",
        )

    def _amortize(
        self, params: ValidParameters, quote: Optional[Quote]
    ) -> AmortizationResult:
        if quote is None:
            return amortize(
                params.mortgage_amount,
                params.term_years,
                None,
                default_rate_percent=self._default_rate_percent,
            )
        return amortize(
            params.mortgage_amount,
            params.term_years,
            quote.interest_rate_percent,
            rate_source=quote.title,
            default_rate_percent=self._default_rate_percent,
        )

    def _cancel_in_flight(self) -> None:
        if self._retrieval is not None and not self._retrieval.done():
            logger.info("Cancelling superseded quote retrieval")
            self._retrieval.cancel()
        self._retrieval = None

    def _fail(self) -> None:
        state = self._state
        state.is_retrieving = False
        state.last_error = MSG_GENERIC_FAILURE
        state.phase = CalculatorPhase.INVALID


__all__ = ["MortgageCalculator"]
