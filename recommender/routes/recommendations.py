"""
FastAPI routes for the recommendation cycle.

Endpoints:
- POST /recommendations/query: Run one recommendation cycle
- GET  /recommendations/state: Current view state

Recommendation failures are not HTTP errors: they are part of the view
state (status="error" with a user-facing message), so both endpoints always
answer 200 with a ViewStateResponse.
"""

import logging
from fastapi import APIRouter, Depends

from recommender.dependencies import get_view_state_controller
from recommender.schemas.recommendations import (
    RecommendationQueryRequest,
    ViewStateResponse,
)
from recommender.services.view_state import ViewStateController
from recommender.utils.logging import truncate_query

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/query",
    response_model=ViewStateResponse,
    status_code=200,
    summary="Query product recommendations",
    description="""
    Runs one recommendation cycle for the given query.

    **Behavior:**
    - Empty query: restores the full catalog, the model is not called
    - Non-empty query: Gemini selects products from the catalog
    - Failure: status="error", results=[], generic error_message
    - Request already in flight: the call is ignored and the current state
      (status="loading") is returned
    """
)
async def query_recommendations_endpoint(
    request: RecommendationQueryRequest,
    controller: ViewStateController = Depends(get_view_state_controller)
) -> ViewStateResponse:
    """
    Recommendation query endpoint.

    - Parse/Validate: Handled by Pydantic RecommendationQueryRequest
    - Cycle: Delegated to the ViewStateController (never raises)
    - Return response: ViewStateResponse built from the resulting state
    """
    logger.info(f"POST /recommendations/query called, query='{truncate_query(request.query)}'")

    state = await controller.submit(request.query)

    logger.info(f"Returning state with status={state.status}, results={len(state.results)}")
    return ViewStateResponse.from_state(state)


@router.get(
    "/state",
    response_model=ViewStateResponse,
    status_code=200,
    summary="Current view state",
)
async def get_state_endpoint(
    controller: ViewStateController = Depends(get_view_state_controller)
) -> ViewStateResponse:
    """Return the current view state without changing it."""
    return ViewStateResponse.from_state(controller.snapshot())
