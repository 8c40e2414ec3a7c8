"""
AI components for the AI Product Recommender.

1. Recommendation System (Catalog-Grounded LLM)
   - Sends the user query and the full catalog to Gemini in one prompt
   - Uses the Google Gen AI SDK directly (no agent framework)
   - Service layer: recommender/services/recommendation_service.py
"""

from recommender.agents.recommendation import build_recommendation_prompt

__all__ = [
    "build_recommendation_prompt",
]
