"""
Health check route for the AI Product Recommender.

Provides a simple status check for load balancers, monitoring and
deployment verification.
"""

from fastapi import APIRouter, Depends

from recommender.catalog import Catalog
from recommender.dependencies import get_catalog_dependency
from recommender.schemas.health import HealthResponse
from recommender.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Returns a simple status indicator and the size of the loaded catalog. "
        "Does not call the external model."
    ),
    status_code=200,
)
async def health_check(
    catalog: Catalog = Depends(get_catalog_dependency)
) -> HealthResponse:
    """
    Health check endpoint.

    Example response:
        {
            "status": "ok",
            "catalog_size": 15
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", catalog_size=len(catalog))
