"""
Recommendation System - Catalog-Grounded LLM

This module contains the prompt template for the Gemini-based recommender.

Architecture:
- Pattern: single-shot LLM call over a static catalog
- Model: configurable (GEMINI_MODEL, default Gemini 2.5 Flash)
- Output: JSON array of product ids, parsed from the reply text

The service layer is in:
- recommender/services/recommendation_service.py
"""

from recommender.agents.recommendation.prompts import (
    RECOMMENDATION_PROMPT_TEMPLATE,
    build_recommendation_prompt,
    serialize_catalog,
)

__all__ = [
    "RECOMMENDATION_PROMPT_TEMPLATE",
    "build_recommendation_prompt",
    "serialize_catalog",
]
