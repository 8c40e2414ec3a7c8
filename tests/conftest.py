"""
Pytest configuration for the AI Product Recommender tests.

Sets up test environment and global fixtures.
"""
import os
from typing import Iterable, List, Optional, Sequence, Set

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from recommender.catalog import build_catalog  # noqa: E402
from recommender.schemas.products import Product  # noqa: E402


class FakeRecommender:
    """
    Stand-in for RecommendationClient.

    Returns `ids` (or raises `error`) and records every query it receives.
    """

    def __init__(self, ids: Optional[Iterable[int]] = None, error: Optional[Exception] = None):
        self.ids = set(ids or [])
        self.error = error
        self.calls: List[str] = []

    async def recommend(self, query: str, catalog: Sequence[Product]) -> Set[int]:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return set(self.ids)


@pytest.fixture
def catalog():
    """Small catalog with ids 2, 7, 9 and 11 (in that order)."""
    return build_catalog([
        {"id": 2, "name": "Nimbus Air 14 Laptop", "category": "Laptops",
         "price": 54990, "description": "Thin and light laptop."},
        {"id": 7, "name": "EchoMax ANC Headphones", "category": "Audio",
         "price": 24990, "description": "Noise cancelling headphones."},
        {"id": 9, "name": "Trailmaster GTX Hiking Boots", "category": "Footwear",
         "price": 8999, "description": "Waterproof hiking boots."},
        {"id": 11, "name": "BrewMate Espresso Machine", "category": "Kitchen",
         "price": 15990, "description": "15-bar espresso machine."},
    ])


@pytest.fixture
def fake_recommender():
    """FakeRecommender returning ids 9 and 2 by default."""
    return FakeRecommender(ids=[9, 2])


@pytest.fixture
def make_recommender():
    """Factory for FakeRecommender instances."""
    return FakeRecommender
