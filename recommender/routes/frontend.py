"""Routes serving the single-page recommender UI."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from recommender.dependencies import get_view_state_controller
from recommender.schemas.recommendations import ViewState
from recommender.services.view_state import ViewStateController
from recommender.utils.formatting import format_inr

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["inr"] = format_inr

router = APIRouter(tags=["frontend"])


def _render(request: Request, state: ViewState) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"state": state},
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def render_page(
    request: Request,
    controller: ViewStateController = Depends(get_view_state_controller),
) -> HTMLResponse:
    """Render the page for the current view state."""
    return _render(request, controller.snapshot())


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def submit_query(
    request: Request,
    query: str = Form(""),
    controller: ViewStateController = Depends(get_view_state_controller),
) -> HTMLResponse:
    """Handle the search form (button or Enter key) and render the result."""
    state = await controller.submit(query)
    return _render(request, state)
