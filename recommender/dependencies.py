"""
FastAPI dependency functions.

The application owns exactly one ViewStateController (created in
recommender/main.py and stored on app.state). Routes reach it through
get_view_state_controller so tests can override it.
"""

from fastapi import Depends, Request

from recommender.catalog import Catalog
from recommender.services.view_state import ViewStateController


def get_view_state_controller(request: Request) -> ViewStateController:
    """Return the session's ViewStateController."""
    return request.app.state.controller


def get_catalog_dependency(
    controller: ViewStateController = Depends(get_view_state_controller)
) -> Catalog:
    """Return the catalog the controller was built with."""
    return controller.catalog
