"""Render-ready projection of calculator state."""

from __future__ import annotations

from typing import Optional

from ..configuration.lending_limits import PLACEHOLDER
from ..models import CalculatorState, CalculatorViewModel, Quote, QuoteCard
from ..utils.parsing import format_currency, format_percent


def to_quote_card(quote: Quote, selected_id: Optional[str] = None) -> QuoteCard:
    return QuoteCard(
        id=quote.id,
        title=quote.title,
        interest_rate=format_percent(quote.interest_rate_percent, PLACEHOLDER),
        rate_type=quote.rate_type,
        rate_period=quote.rate_period,
        follow_on_rate=quote.follow_on_rate,
        aprc=format_percent(quote.aprc_percent, PLACEHOLDER),
        product_fee=quote.product_fee,
        max_loan_to_value=format_percent(quote.max_loan_to_value_percent, PLACEHOLDER),
        early_repayment_charge=quote.early_repayment_charge,
        cta_text=quote.cta_text,
        cta_link=quote.cta_link,
        features=list(quote.features),
        is_selected=quote.id == selected_id,
    )


def to_view_model(state: CalculatorState, currency_symbol: str = "£") -> CalculatorViewModel:
    """Project ``state`` for rendering; ``state`` is only read."""

    selected_id = state.selected_quote.id if state.selected_quote else None
    result = state.result

    view = CalculatorViewModel(
        phase=state.phase,
        is_loading=state.is_retrieving,
        has_results=result is not None,
        can_select=(
            state.priced_parameters is not None
            and not state.is_retrieving
            and bool(state.quotes)
        ),
        deposit=format_currency(state.deposit, currency_symbol),
        selected_quote_id=selected_id,
        quotes=[to_quote_card(quote, selected_id) for quote in state.quotes],
        error_message=state.last_error,
    )
    if result is not None:
        view.monthly_payment = format_currency(result.monthly_payment, currency_symbol)
        view.total_interest = format_currency(result.total_interest, currency_symbol)
        view.total_amount = format_currency(result.total_amount, currency_symbol)
        view.rate_used_label = result.rate_used_label
    return view
