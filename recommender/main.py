"""
FastAPI application entry point for the AI Product Recommender.

This module creates the FastAPI app instance, builds the single
ViewStateController for the session and registers all routers.
"""

import logging
import os
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from recommender import __version__
from recommender.catalog import get_catalog
from recommender.config import settings
from recommender.routes.frontend import router as frontend_router
from recommender.routes.health import router as health_router
from recommender.routes.products import router as products_router
from recommender.routes.recommendations import router as recommendations_router
from recommender.services.recommendation_service import RecommendationClient
from recommender.services.view_state import ViewStateController

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS env var
    - Anything else: Allows all origins for local development

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    environment = os.getenv("ENVIRONMENT", "development")

    if environment == "production":
        cors_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")
        if cors_origins:
            origins = [origin.strip() for origin in cors_origins.split(",")]
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
            return origins
        # The page is served from the same origin; cross-origin callers must be listed
        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No cross-origin callers allowed."
        )
        return []

    logger.info(f"CORS configured for {environment}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="AI Product Recommender",
    description="Free-text product recommendations over a fixed catalog, powered by Gemini",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Single session: one controller owns the one ViewState
app.state.controller = ViewStateController(
    catalog=get_catalog(),
    client=RecommendationClient.from_settings(),
)


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log detailed validation errors for debugging."""
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_encoder(exc.errors()),
        }
    )

# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(frontend_router)
app.include_router(health_router)
app.include_router(products_router)
app.include_router(recommendations_router)

logger.info("FastAPI app initialized successfully")
