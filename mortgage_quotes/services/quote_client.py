"""Client for the remote mortgage quote source.

``fetch_quotes`` never raises for remote failures: transport errors, non-2xx
responses and unreadable bodies are logged and answered with the fallback
catalog so the calculator can always produce a result.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from ..config import settings
from ..exceptions import RetrievalError
from ..models import Quote, ValidParameters
from .fallback_catalog import fallback_quotes
from .quote_normalizer import normalize_quotes

logger = logging.getLogger(__name__)


def build_query_params(params: ValidParameters) -> Dict[str, Any]:
    return {
        "propertyValue": params.property_value,
        "mortgageAmount": params.mortgage_amount,
        "mortgageTerm": params.term_years,
        "ltv": params.loan_to_value,
    }


def build_persisted_query_url(base_url: str, query_params: Dict[str, Any]) -> str:
    """Encode variables the way persisted GraphQL queries expect (``;name=value``)."""
    encoded = "".join(f";{name}={value}" for name, value in query_params.items())
    return base_url.rstrip("/") + encoded


class QuoteClient:
    """Fetches and normalizes quotes for validated loan parameters."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        list_field: Optional[str] = None,
        fallback: Callable[[], List[Quote]] = fallback_quotes,
    ):
        self.base_url = base_url or settings.quote_source_url
        self.timeout = timeout if timeout is not None else settings.quote_request_timeout_seconds
        self.list_field = list_field or settings.quote_list_field
        self._http_client = http_client
        self._fallback = fallback

    async def fetch_quotes(self, params: ValidParameters) -> List[Quote]:
        """Return remote quotes, or the fallback catalog when none can be used."""

        url = build_persisted_query_url(self.base_url, build_query_params(params))
        try:
            payload = await self._request(url)
        except RetrievalError as exc:
            logger.warning(
                "Quote retrieval failed, serving fallback catalog: %s",
                exc.message,
                extra={"details": exc.details},
            )
            return self._fallback()

        quotes = normalize_quotes(payload, self.list_field)
        if not quotes:
            logger.info("Quote source returned no products, serving fallback catalog")
            return self._fallback()

        logger.info("Retrieved %d quotes from quote source", len(quotes))
        return quotes

    async def _request(self, url: str) -> Any:
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RetrievalError(
                f"Quote source responded with status {exc.response.status_code}",
                {"url": url, "status_code": exc.response.status_code},
            ) from exc
        except httpx.HTTPError as exc:
            raise RetrievalError(
                f"Quote source request failed: {exc}", {"url": url}
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RetrievalError(
                "Quote source returned an unreadable body", {"url": url}
            ) from exc


__all__ = ["QuoteClient", "build_persisted_query_url", "build_query_params"]
