"""Map the remote quote payload, whatever its shape, onto canonical ``Quote`` records.

The quote endpoint is not schema-stable across deployments. Extraction is
driven by ``EXTRACTION_STRATEGIES``: an ordered list of key paths tried in
turn, the first one resolving to a list wins. To support a new payload shape,
append a strategy; ranking and selection are unaffected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..config import settings
from ..configuration.lending_limits import DEFAULT_CTA_LINK, DEFAULT_CTA_TEXT, PLACEHOLDER
from ..models import Quote
from ..utils.parsing import parse_number

logger = logging.getLogger(__name__)

# Placeholder in a strategy path replaced by the configured list field name.
LIST_FIELD = "{list_field}"


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named key path leading to the product list inside a response."""

    name: str
    path: Tuple[str, ...]

    def extract(self, payload: Any, list_field: str) -> Optional[List[Any]]:
        node = payload
        for key in self.path:
            if not isinstance(node, Mapping):
                return None
            node = node.get(list_field if key == LIST_FIELD else key)
        if isinstance(node, list):
            return node
        return None


EXTRACTION_STRATEGIES: Sequence[ExtractionStrategy] = (
    ExtractionStrategy("nested_list_items", ("data", LIST_FIELD, "items")),
    ExtractionStrategy("list_items", (LIST_FIELD, "items")),
    ExtractionStrategy("graphql_options", ("data", "mortgageOptions")),
    ExtractionStrategy("flat_options", ("mortgageOptions",)),
    ExtractionStrategy("bare_array", ()),
)

# Canonical field -> keys tried in priority order.
FIELD_KEYS: Mapping[str, Tuple[str, ...]] = {
    "id": ("id", "_id", "_path"),
    "title": ("title", "name", "productName"),
    "interest_rate_percent": ("interestRate", "rate", "initialRate"),
    "rate_type": ("rateType", "type"),
    "rate_period": ("ratePeriod", "fixedUntil"),
    "follow_on_rate": ("followOnRate", "followedBy"),
    "aprc_percent": ("aprc", "APRC"),
    "product_fee": ("productFee", "fee"),
    "max_loan_to_value_percent": ("maxLoanToValue", "maxLTV", "ltv"),
    "early_repayment_charge": ("earlyRepaymentCharge", "erc"),
    "cta_text": ("ctaText", "buttonText"),
    "cta_link": ("ctaLink", "applyLink"),
    "features": ("features",),
}

_TEXT_DEFAULTS: Mapping[str, str] = {
    "cta_text": DEFAULT_CTA_TEXT,
    "cta_link": DEFAULT_CTA_LINK,
}
_NUMERIC_FIELDS = ("interest_rate_percent", "aprc_percent", "max_loan_to_value_percent")


def _unwrap(value: Any) -> Any:
    # Content-fragment rich text arrives as {"plaintext": ...} / {"html": ...}.
    if isinstance(value, Mapping):
        for key in ("plaintext", "markdown", "html", "value"):
            if key in value:
                return value[key]
        return None
    return value


def _lookup(item: Mapping[str, Any], field_name: str) -> Any:
    for key in FIELD_KEYS[field_name]:
        value = _unwrap(item.get(key))
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _text(item: Mapping[str, Any], field_name: str) -> str:
    value = _lookup(item, field_name)
    if value is None:
        return _TEXT_DEFAULTS.get(field_name, PLACEHOLDER)
    return str(value).strip()


def _features(item: Mapping[str, Any]) -> List[str]:
    value = _lookup(item, "features")
    if isinstance(value, str):
        return [value.strip()]
    if isinstance(value, list):
        return [str(_unwrap(entry)).strip() for entry in value if _unwrap(entry) is not None]
    return []


def normalize_quote(item: Mapping[str, Any], position: int = 0) -> Quote:
    """Build a ``Quote`` from one raw product; missing fields never raise."""

    title = _text(item, "title")
    raw_id = _lookup(item, "id")
    if raw_id is not None:
        quote_id = str(raw_id)
    elif title != PLACEHOLDER:
        quote_id = title
    else:
        quote_id = f"quote-{position + 1}"

    values: dict[str, Any] = {
        name: parse_number(_lookup(item, name)) for name in _NUMERIC_FIELDS
    }
    for name in (
        "rate_type",
        "rate_period",
        "follow_on_rate",
        "product_fee",
        "early_repayment_charge",
        "cta_text",
        "cta_link",
    ):
        values[name] = _text(item, name)

    return Quote(id=quote_id, title=title, features=_features(item), **values)


def extract_items(
    payload: Any, list_field: Optional[str] = None
) -> Optional[List[Any]]:
    """Return the raw product list from the first matching strategy, if any."""

    field_name = list_field or settings.quote_list_field
    for strategy in EXTRACTION_STRATEGIES:
        items = strategy.extract(payload, field_name)
        if items is not None:
            logger.debug("Quote payload matched strategy %s", strategy.name)
            return items
    return None


def normalize_quotes(payload: Any, list_field: Optional[str] = None) -> List[Quote]:
    """Normalize a raw response into canonical quotes; unknown shapes yield ``[]``."""

    items = extract_items(payload, list_field)
    if items is None:
        logger.warning("Quote payload did not match any known shape")
        return []

    quotes: List[Quote] = []
    for position, item in enumerate(items):
        if not isinstance(item, Mapping):
            logger.warning("Skipping non-object quote entry at position %d", position)
            continue
        quotes.append(normalize_quote(item, position))
    return quotes

__all__ = [
    "EXTRACTION_STRATEGIES",
    "ExtractionStrategy",
    "extract_items",
    "normalize_quote",
    "normalize_quotes",
]
