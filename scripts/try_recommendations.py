#!/usr/bin/env python3
"""
Recommendation Client Manual Check

Calls the live Gemini model with the bundled catalog (or CATALOG_PATH) and
prints the parsed ids and the matching products. Useful for checking prompt
changes without starting the web server.

Usage:
    python scripts/try_recommendations.py --query "laptop for video editing"
    python scripts/try_recommendations.py --suite
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from recommender.catalog import get_catalog
from recommender.services.recommendation_service import (
    RecommendationClient,
    RecommendationError,
)
from recommender.services.view_state import filter_catalog
from recommender.utils.formatting import format_inr

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SUITE_QUERIES = [
    "I want a laptop under ₹60,000",
    "something to help me sleep on flights",
    "gift for a friend who runs marathons",
    "I need to work from home comfortably",
    "a flying car",
]


async def run_query(client: RecommendationClient, query: str) -> None:
    """Run a single query and print the outcome."""
    catalog = get_catalog()

    print("\n" + "=" * 60)
    print(f"QUERY: {query}")
    print("=" * 60)

    try:
        ids = await client.recommend(query, catalog)
    except RecommendationError as e:
        print(f"\n❌ RecommendationError ({e.kind.value}): {e}")
        return

    products = filter_catalog(catalog, ids)
    unknown = sorted(ids - {p.id for p in catalog})

    print(f"\n✅ Model returned ids: {sorted(ids)}")
    if unknown:
        print(f"   Ignored ids not in catalog: {unknown}")
    if not products:
        print("   No products match your criteria.")
    for product in products:
        print(f"  [{product.id}] {product.name} - {format_inr(product.price)} ({product.category})")


async def main() -> None:
    parser = argparse.ArgumentParser(description="Try the recommendation client against Gemini")
    parser.add_argument("--query", "-q", help="Free-text shopping query")
    parser.add_argument("--suite", action="store_true", help="Run a set of sample queries")
    args = parser.parse_args()

    if not os.getenv("GOOGLE_API_KEY"):
        print("\n⚠️  ERROR: GOOGLE_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GOOGLE_API_KEY=your-gemini-api-key")
        sys.exit(1)

    client = RecommendationClient.from_settings()

    if args.suite:
        for query in SUITE_QUERIES:
            await run_query(client, query)
    elif args.query:
        await run_query(client, args.query)
    else:
        parser.error("pass --query or --suite")


if __name__ == "__main__":
    asyncio.run(main())
