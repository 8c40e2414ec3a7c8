"""
Tests for the ViewStateController recommendation cycle.

Covers the idle/loading/error transitions, catalog filtering, the empty
query short-circuit and the single-flight guard.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from recommender.services.recommendation_service import (
    RecommendationClient,
    RecommendationError,
    RecommendationErrorKind,
    parse_recommended_ids,
)
from recommender.services.view_state import (
    RECOMMENDATION_ERROR_MESSAGE,
    ViewStateController,
    filter_catalog,
)


def ids_of(products):
    return [p.id for p in products]


class TestInitialState:

    def test_starts_idle_with_full_catalog(self, catalog, fake_recommender):
        controller = ViewStateController(catalog, fake_recommender)
        state = controller.snapshot()

        assert state.status == "idle"
        assert state.query == ""
        assert state.error_message is None
        assert ids_of(state.results) == [2, 7, 9, 11]
        assert fake_recommender.calls == []

    def test_snapshot_is_a_copy(self, catalog, fake_recommender):
        controller = ViewStateController(catalog, fake_recommender)
        snapshot = controller.snapshot()
        snapshot.results.clear()

        assert len(controller.state.results) == 4


class TestFilterCatalog:

    def test_keeps_catalog_order(self, catalog):
        assert ids_of(filter_catalog(catalog, {11, 2, 9})) == [2, 9, 11]

    def test_ignores_unknown_ids(self, catalog):
        assert ids_of(filter_catalog(catalog, {7, 404})) == [7]

    def test_empty_set(self, catalog):
        assert filter_catalog(catalog, set()) == []


class TestSubmit:

    @pytest.mark.asyncio
    async def test_success_filters_catalog_in_catalog_order(self, catalog, make_recommender):
        recommender = make_recommender(ids=[9, 2, 7])
        controller = ViewStateController(catalog, recommender)

        state = await controller.submit("gear for a trip")

        assert state.status == "idle"
        assert state.query == "gear for a trip"
        assert ids_of(state.results) == [2, 7, 9]
        assert recommender.calls == ["gear for a trip"]

    @pytest.mark.asyncio
    async def test_round_trip_from_reply_text(self, catalog, make_recommender):
        recommender = make_recommender(ids=parse_recommended_ids("Here you go: [2, 7, 7, 9] enjoy!"))
        controller = ViewStateController(catalog, recommender)

        state = await controller.submit("anything")

        assert ids_of(state.results) == [2, 7, 9]

    @pytest.mark.asyncio
    async def test_no_match_is_not_an_error(self, catalog, make_recommender):
        controller = ViewStateController(catalog, make_recommender(ids=[404]))

        state = await controller.submit("a flying car")

        assert state.status == "idle"
        assert state.results == []
        assert state.error_message is None
        assert state.no_match is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", list(RecommendationErrorKind))
    async def test_any_failure_enters_error_state(self, catalog, kind, make_recommender):
        recommender = make_recommender(error=RecommendationError(kind, "boom"))
        controller = ViewStateController(catalog, recommender)

        state = await controller.submit("laptop")

        assert state.status == "error"
        assert state.is_loading is False
        assert state.results == []
        assert state.error_message == RECOMMENDATION_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_unexpected_exception_does_not_escape(self, catalog, make_recommender):
        controller = ViewStateController(catalog, make_recommender(error=RuntimeError("bug")))

        state = await controller.submit("laptop")

        assert state.status == "error"
        assert state.results == []

    @pytest.mark.asyncio
    async def test_success_after_error_clears_error(self, catalog, make_recommender):
        recommender = make_recommender(
            error=RecommendationError(RecommendationErrorKind.TRANSPORT, "down")
        )
        controller = ViewStateController(catalog, recommender)
        await controller.submit("laptop")

        recommender.error = None
        recommender.ids = {11}
        state = await controller.submit("coffee")

        assert state.status == "idle"
        assert state.error_message is None
        assert ids_of(state.results) == [11]

    @pytest.mark.asyncio
    async def test_submit_without_argument_uses_current_query(self, catalog, make_recommender):
        recommender = make_recommender(ids=[7])
        controller = ViewStateController(catalog, recommender)
        controller.set_query("headphones")

        state = await controller.submit()

        assert recommender.calls == ["headphones"]
        assert ids_of(state.results) == [7]

    @pytest.mark.asyncio
    async def test_whitespace_query_still_calls_model(self, catalog, make_recommender):
        recommender = make_recommender(ids=[])
        controller = ViewStateController(catalog, recommender)

        await controller.submit(" ")

        assert recommender.calls == [" "]


class TestEmptyQuery:

    @pytest.mark.asyncio
    async def test_restores_full_catalog_without_calling_model(self, catalog, make_recommender):
        recommender = make_recommender(ids=[2])
        controller = ViewStateController(catalog, recommender)
        await controller.submit("laptop")
        assert ids_of(controller.state.results) == [2]

        state = await controller.submit("")

        assert state.status == "idle"
        assert ids_of(state.results) == [2, 7, 9, 11]
        assert recommender.calls == ["laptop"]

    @pytest.mark.asyncio
    async def test_clears_error_state(self, catalog, make_recommender):
        recommender = make_recommender(
            error=RecommendationError(RecommendationErrorKind.PARSE_FAILURE, "no array")
        )
        controller = ViewStateController(catalog, recommender)
        await controller.submit("laptop")
        assert controller.state.status == "error"

        state = await controller.submit("")

        assert state.status == "idle"
        assert state.error_message is None
        assert ids_of(state.results) == [2, 7, 9, 11]
        assert recommender.calls == ["laptop"]


class TestSingleFlight:

    @pytest.mark.asyncio
    async def test_submit_while_loading_is_ignored(self, catalog):
        release = asyncio.Event()
        calls = []

        class SlowRecommender:
            async def recommend(self, query, catalog):
                calls.append(query)
                await release.wait()
                return {7}

        controller = ViewStateController(catalog, SlowRecommender())

        first = asyncio.create_task(controller.submit("headphones"))
        await asyncio.sleep(0)
        assert controller.state.status == "loading"

        ignored = await controller.submit("boots")
        assert ignored.status == "loading"
        assert ignored.query == "headphones"

        controller.set_query("typing while loading")
        assert controller.state.query == "headphones"

        empty = await controller.submit("")
        assert empty.status == "loading"

        release.set()
        final = await first

        assert calls == ["headphones"]
        assert final.status == "idle"
        assert ids_of(final.results) == [7]

    @pytest.mark.asyncio
    async def test_loading_flag_cleared_when_cancelled(self, catalog):
        class HangingRecommender:
            async def recommend(self, query, catalog):
                await asyncio.sleep(10)

        controller = ViewStateController(catalog, HangingRecommender())
        task = asyncio.create_task(controller.submit("laptop"))
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert controller.state.is_loading is False


class TestWithRecommendationClient:
    """Controller driven by a real RecommendationClient over a mocked Gemini."""

    @staticmethod
    def make_controller(catalog, reply_text):
        mock_gemini = MagicMock()
        mock_response = MagicMock()
        mock_response.candidates = []
        mock_response.text = reply_text
        mock_gemini.aio.models.generate_content = AsyncMock(return_value=mock_response)
        client = RecommendationClient(
            api_key="test-google-api-key",
            model="gemini-test",
            genai_client=mock_gemini,
        )
        return ViewStateController(catalog, client), mock_gemini

    @pytest.mark.asyncio
    async def test_reply_with_prose_and_duplicates(self, catalog):
        controller, mock_gemini = self.make_controller(catalog, "Here you go: [9, 2, 2, 404] enjoy!")

        state = await controller.submit("laptop and boots")

        assert state.status == "idle"
        assert ids_of(state.results) == [2, 9]
        mock_gemini.aio.models.generate_content.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reply_without_array_enters_error_state(self, catalog):
        controller, _ = self.make_controller(catalog, "I cannot help")

        state = await controller.submit("laptop")

        assert state.status == "error"
        assert state.is_loading is False
        assert state.results == []
        assert state.error_message == RECOMMENDATION_ERROR_MESSAGE
