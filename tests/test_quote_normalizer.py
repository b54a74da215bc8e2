import pytest

from mortgage_quotes.models import Quote
from mortgage_quotes.services.quote_normalizer import (
    EXTRACTION_STRATEGIES,
    extract_items,
    normalize_quote,
    normalize_quotes,
)
from tests.factories import build_raw_quote


def _shapes(item):
    return {
        "nested_list_items": {"data": {"mortgageFixedList": {"items": [item]}}},
        "list_items": {"mortgageFixedList": {"items": [item]}},
        "flat_options": {"mortgageOptions": [item]},
        "bare_array": [item],
    }


def test_recognised_shapes_normalize_to_same_quote():
    item = build_raw_quote()
    results = {
        name: normalize_quotes(payload, "mortgageFixedList")
        for name, payload in _shapes(item).items()
    }

    expected = results["nested_list_items"]
    assert len(expected) == 1
    for quotes in results.values():
        assert quotes == expected


def test_canonical_fields():
    (quote,) = normalize_quotes([build_raw_quote()])

    assert quote == Quote(
        id="fixed-5y",
        title="5 Year Fixed",
        interest_rate_percent=4.2,
        rate_type="Fixed",
        rate_period="Fixed Rate until 31.03.30",
        follow_on_rate="6.94% Variable for remainder of term",
        aprc_percent=5.9,
        product_fee="£0",
        max_loan_to_value_percent=85.0,
        early_repayment_charge="Yes",
        cta_text="Apply now",
        cta_link="/apply/fixed-5y",
        features=["Free valuation"],
    )


def test_legacy_graphql_result_shape():
    payload = {"data": {"mortgageOptions": [build_raw_quote()]}}
    assert [q.id for q in normalize_quotes(payload)] == ["fixed-5y"]


@pytest.mark.parametrize(
    "payload",
    [{}, {"data": None}, {"unexpected": [1, 2]}, "text", 42, None, {"mortgageFixedList": {}}],
)
def test_unrecognised_shape_yields_empty_list(payload):
    assert normalize_quotes(payload) == []


def test_strategy_priority_prefers_deepest_wrapper():
    payload = {
        "data": {"mortgageFixedList": {"items": [build_raw_quote(id="deep")]}},
        "mortgageOptions": [build_raw_quote(id="flat")],
    }
    assert [q.id for q in normalize_quotes(payload, "mortgageFixedList")] == ["deep"]
    assert EXTRACTION_STRATEGIES[0].name == "nested_list_items"


def test_configured_list_field():
    payload = {"data": {"offerList": {"items": [build_raw_quote()]}}}

    assert extract_items(payload, "offerList") == [build_raw_quote()]
    assert extract_items(payload, "mortgageFixedList") is None


def test_alternate_keys_are_used():
    quote = normalize_quote(
        {"name": "Tracker", "rate": 5.1, "maxLTV": 60, "fee": "£499", "erc": "No"}
    )

    assert quote.title == "Tracker"
    assert quote.id == "Tracker"
    assert quote.interest_rate_percent == 5.1
    assert quote.max_loan_to_value_percent == 60
    assert quote.product_fee == "£499"
    assert quote.early_repayment_charge == "No"


def test_missing_fields_resolve_to_placeholders():
    quote = normalize_quote({}, position=2)

    assert quote.id == "quote-3"
    assert quote.title == "N/A"
    assert quote.rate_type == "N/A"
    assert quote.interest_rate_percent is None
    assert quote.max_loan_to_value_percent is None
    assert quote.cta_text == "How to apply"
    assert quote.cta_link == "#"
    assert quote.features == []


def test_rich_text_and_path_identifiers_are_unwrapped():
    quote = normalize_quote(
        {
            "_path": "/content/dam/mortgages/fixed-3y",
            "title": {"plaintext": "3 Year Fixed"},
            "ratePeriod": {"html": "<p>Fixed until 2028</p>"},
            "interestRate": "",
            "rate": "4.6 %",
        }
    )

    assert quote.id == "/content/dam/mortgages/fixed-3y"
    assert quote.title == "3 Year Fixed"
    assert quote.rate_period == "<p>Fixed until 2028</p>"
    assert quote.interest_rate_percent == 4.6


def test_unparseable_numbers_become_none():
    quote = normalize_quote({"id": "x", "interestRate": "call us", "maxLoanToValue": "n/a"})

    assert quote.interest_rate_percent is None
    assert quote.max_loan_to_value_percent is None


def test_non_object_entries_are_skipped():
    quotes = normalize_quotes([build_raw_quote(), "junk", 3, None])
    assert [q.id for q in quotes] == ["fixed-5y"]
