"""
Recommendation Prompt Template

Builds the single prompt sent to Gemini for a recommendation cycle.

Prompt contract:
- The user query is embedded verbatim (quoted)
- The full catalog is embedded as pretty-printed JSON
- The model must answer with ONLY a JSON array of integer product ids,
  without markdown fences

The reply is parsed in recommender/services/recommendation_service.py.
"""

import json
from typing import Sequence

from recommender.schemas.products import Product

# =============================================================================
# PROMPT TEMPLATE
# =============================================================================

RECOMMENDATION_PROMPT_TEMPLATE = """
Based on the following user query and product list, please recommend the best products.
User Query: "{query}"

Product List (in JSON format):
{catalog_json}

Your task is to return a JSON array of the integer 'id's of the recommended products.
For example: [1, 5, 8].
Return ONLY the JSON array and nothing else. Do not wrap it in markdown backticks.
"""


def serialize_catalog(catalog: Sequence[Product]) -> str:
    """Serialize the catalog for the prompt (2-space indentation, catalog order)."""
    return json.dumps(
        [product.model_dump() for product in catalog],
        indent=2,
        ensure_ascii=False,
    )


def build_recommendation_prompt(query: str, catalog: Sequence[Product]) -> str:
    """
    Build the recommendation prompt.

    Args:
        query: User's free-text query (non-empty; empty queries never reach the model)
        catalog: Full product catalog

    Returns:
        Prompt string for a single generate_content call
    """
    return RECOMMENDATION_PROMPT_TEMPLATE.format(
        query=query,
        catalog_json=serialize_catalog(catalog),
    )
