"""
View State Controller.

Owns the single ViewState of the session and applies the recommendation
cycle transitions:

    submit("")          -> idle, results = full catalog (model not called)
    submit(query)       -> loading, error cleared, model called
      success(ids)      -> idle, results = catalog filtered to ids
      RecommendationError -> error, results = [], fixed apology message

A submit while a cycle is in flight is ignored. The guard is checked and
set before the first await, so under asyncio at most one model call is
outstanding.
"""

from typing import Protocol, Sequence, Set

from recommender.schemas.products import Product
from recommender.schemas.recommendations import ViewState
from recommender.services.recommendation_service import RecommendationError
from recommender.utils.logging import get_logger, truncate_query

logger = get_logger(__name__)

RECOMMENDATION_ERROR_MESSAGE = "Sorry, I couldn't get recommendations. Please try again."


class Recommender(Protocol):
    async def recommend(self, query: str, catalog: Sequence[Product]) -> Set[int]:
        ...


def filter_catalog(catalog: Sequence[Product], ids: Set[int]) -> list[Product]:
    """Catalog products whose id is in ids, in catalog order."""
    return [product for product in catalog if product.id in ids]


class ViewStateController:
    """Single owner of the session's ViewState."""

    def __init__(self, catalog: Sequence[Product], client: Recommender):
        self.catalog = tuple(catalog)
        self.client = client
        self.state = ViewState(results=list(self.catalog))

    def snapshot(self) -> ViewState:
        """Copy of the current state, safe to render or serialize."""
        return self.state.model_copy(update={"results": list(self.state.results)})

    def set_query(self, text: str) -> ViewState:
        """Replace the query text (keystroke). Ignored while loading."""
        if self.state.is_loading:
            return self.snapshot()
        self.state.query = text
        return self.snapshot()

    async def submit(self, query: str | None = None) -> ViewState:
        """
        Run one recommendation cycle.

        Args:
            query: New query text. When omitted, the current state query is used.

        Returns:
            Snapshot of the state after the cycle (or unchanged if a cycle was
            already in flight).
        """
        if self.state.is_loading:
            logger.info("submit ignored: a recommendation request is already in flight")
            return self.snapshot()

        if query is not None:
            self.state.query = query
        query = self.state.query

        if not query:
            self.state.error_message = None
            self.state.results = list(self.catalog)
            logger.info("Empty query, showing full catalog")
            return self.snapshot()

        self.state.is_loading = True
        self.state.error_message = None

        try:
            ids = await self.client.recommend(query, self.catalog)
        except RecommendationError as e:
            logger.error(f"Error fetching recommendations for query='{truncate_query(query)}': {e}")
            self.state.error_message = RECOMMENDATION_ERROR_MESSAGE
            self.state.results = []
        except Exception as e:
            logger.exception(f"Unexpected error from recommendation client: {e}")
            self.state.error_message = RECOMMENDATION_ERROR_MESSAGE
            self.state.results = []
        else:
            self.state.results = filter_catalog(self.catalog, ids)
            logger.info(f"Showing {len(self.state.results)} recommended product(s)")
        finally:
            self.state.is_loading = False

        return self.snapshot()
