"""
Pydantic schemas for the recommendation view state and its endpoints.

ViewState is the single piece of mutable UI state. It is owned by the
ViewStateController (recommender/services/view_state.py) and serialized as
ViewStateResponse by the JSON API.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from recommender.schemas.products import Product

ViewStatus = Literal["idle", "loading", "error"]


# ============================================================================
# STATE MODEL
# ============================================================================

class ViewState(BaseModel):
    """
    Current UI state of the single active session.

    Invariants:
    - results only ever contains catalog products
    - is_loading and error_message are never both set once a cycle completes
    """

    query: str = ""
    is_loading: bool = False
    error_message: Optional[str] = None
    results: List[Product] = Field(default_factory=list)

    @property
    def status(self) -> ViewStatus:
        if self.is_loading:
            return "loading"
        if self.error_message is not None:
            return "error"
        return "idle"

    @property
    def no_match(self) -> bool:
        """True when the page should show the "no products match" indicator."""
        return not self.is_loading and not self.results


# ============================================================================
# REQUEST MODELS
# ============================================================================

class RecommendationQueryRequest(BaseModel):
    """
    Request to run one recommendation cycle.

    An empty query is valid: it restores the full catalog without calling
    the model.
    """
    query: str = Field(
        "",
        description="User's free-text shopping query",
        examples=["I want a laptop under ₹60,000", "gift for a runner"],
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class ViewStateResponse(BaseModel):
    """Serialized ViewState returned by the recommendation endpoints."""

    status: ViewStatus = Field(..., description="idle, loading or error")
    query: str = Field(..., description="Query the state was produced for")
    is_loading: bool = Field(..., description="A model call is in flight")
    error_message: Optional[str] = Field(
        None, description="User-facing message, set only in error state"
    )
    no_match: bool = Field(..., description="Results are empty and nothing is loading")
    results: List[Product] = Field(..., description="Products to render, in catalog order")

    @classmethod
    def from_state(cls, state: ViewState) -> "ViewStateResponse":
        return cls(
            status=state.status,
            query=state.query,
            is_loading=state.is_loading,
            error_message=state.error_message,
            no_match=state.no_match,
            results=list(state.results),
        )
