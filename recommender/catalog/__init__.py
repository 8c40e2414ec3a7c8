"""
Catalog Provider for the AI Product Recommender.

The catalog is a fixed, ordered sequence of Product records. Recommendation
results are always a subsequence of it.
"""

from recommender.catalog.provider import (
    Catalog,
    build_catalog,
    get_catalog,
    load_catalog,
)

__all__ = [
    "Catalog",
    "build_catalog",
    "get_catalog",
    "load_catalog",
]
