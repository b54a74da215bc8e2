"""Loader for the embedded fallback mortgage product catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

import yaml

from ..exceptions import ConfigurationError
from ..models import Quote
from .quote_normalizer import normalize_quote

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "fallback_quotes.yaml"
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "config" / CATALOG_FILENAME


@dataclass(frozen=True)
class FallbackCatalog:
    version: str
    quotes: Tuple[Quote, ...]


@lru_cache(maxsize=4)
def load_fallback_catalog(path: Optional[Path] = None) -> FallbackCatalog:
    """Read and normalize the catalog file; a broken file is a deployment defect."""

    location = path or DEFAULT_CATALOG_PATH
    try:
        data = yaml.safe_load(location.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(
            f"Fallback catalog file not found: {location}", {"path": str(location)}
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Fallback catalog file is not valid YAML: {exc}", {"path": str(location)}
        ) from exc

    if not isinstance(data, Mapping):
        raise ConfigurationError("Fallback catalog file has unexpected structure")

    products = data.get("products")
    if not isinstance(products, list) or not products:
        raise ConfigurationError("Fallback catalog 'products' section malformed")

    quotes = tuple(
        normalize_quote(item, position)
        for position, item in enumerate(products)
        if isinstance(item, Mapping)
    )
    version = str(data.get("version", "unversioned"))
    logger.debug("Loaded fallback catalog %s with %d products", version, len(quotes))
    return FallbackCatalog(version=version, quotes=quotes)


def fallback_quotes() -> List[Quote]:
    """Return a fresh list of the catalog quotes."""
    return list(load_fallback_catalog().quotes)


def fallback_catalog_version() -> str:
    return load_fallback_catalog().version


__all__ = [
    "FallbackCatalog",
    "fallback_catalog_version",
    "fallback_quotes",
    "load_fallback_catalog",
]
