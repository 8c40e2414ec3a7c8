"""
Catalog Provider.

Supplies the immutable, ordered product catalog. The catalog is loaded once
per process (bundled data, or a JSON file named by CATALOG_PATH) and is
read-only afterwards.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple

from pydantic import ValidationError

from recommender.catalog.data import PRODUCTS
from recommender.config import settings
from recommender.schemas.products import Product
from recommender.utils.logging import get_logger

logger = get_logger(__name__)

Catalog = Tuple[Product, ...]


def build_catalog(records: Iterable[Mapping[str, Any]]) -> Catalog:
    """
    Validate raw product records into an ordered catalog.

    Raises:
        ValueError: If a record is invalid or an id appears twice.
    """
    products = []
    seen_ids = set()

    for index, record in enumerate(records):
        try:
            product = Product.model_validate(record)
        except ValidationError as e:
            raise ValueError(f"Invalid product at position {index}: {e}") from e

        if product.id in seen_ids:
            raise ValueError(f"Duplicate product id {product.id} at position {index}")
        seen_ids.add(product.id)
        products.append(product)

    return tuple(products)


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Load the catalog from a JSON file, or the bundled data when no path is given.

    The file must contain a JSON array of product objects with the keys
    id, name, category, price and description.
    """
    if path is None:
        catalog = build_catalog(PRODUCTS)
        logger.info(f"Loaded bundled catalog with {len(catalog)} products")
        return catalog

    catalog_file = Path(path)
    try:
        raw = json.loads(catalog_file.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read catalog file {catalog_file}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Catalog file {catalog_file} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ValueError(f"Catalog file {catalog_file} must contain a JSON array")

    catalog = build_catalog(raw)
    logger.info(f"Loaded catalog with {len(catalog)} products from {catalog_file}")
    return catalog


@lru_cache
def get_catalog() -> Catalog:
    """Process-wide catalog, loaded on first use."""
    return load_catalog(settings.CATALOG_PATH)
