"""
Service layer for the AI Product Recommender.

- recommendation_service: builds the prompt, calls Gemini, parses the reply
- view_state: owns the session ViewState and the recommendation cycle

Routes talk to the ViewStateController; only the controller talks to the
RecommendationClient.
"""

from .recommendation_service import (
    RecommendationClient,
    RecommendationError,
    RecommendationErrorKind,
    parse_recommended_ids,
)
from .view_state import (
    RECOMMENDATION_ERROR_MESSAGE,
    ViewStateController,
    filter_catalog,
)

__all__ = [
    "RecommendationClient",
    "RecommendationError",
    "RecommendationErrorKind",
    "parse_recommended_ids",
    "RECOMMENDATION_ERROR_MESSAGE",
    "ViewStateController",
    "filter_catalog",
]
