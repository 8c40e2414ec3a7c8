"""
Recommendation Service - Gemini over a static catalog

This service asks Gemini to pick products from the catalog for a free-text
query and parses the reply into a set of product ids.

Architecture:
- Pattern: single-shot LLM call (no tools, no streaming)
- Model: GEMINI_MODEL (default Gemini 2.5 Flash)
- API: Google Gen AI Python SDK (google-genai), async surface (client.aio)
- Output: JSON array of integer ids, parsed from the reply text

Reply parsing:
The reply is untrusted text that may carry prose or formatting around the
array. We take the span from the first '[' to the last ']' (inclusive),
parse it as JSON and require a list of integers. The span is taken as-is,
so a reply with several bracketed fragments yields everything between the
outermost pair.

Failures (transport, API rejection, unparseable reply) are raised as a single
RecommendationError. Its `kind` is for logs and tests; callers show the same
message for every kind.
"""

import asyncio
import json
from enum import Enum
from typing import Any, Optional, Sequence, Set

from google import genai
from google.genai import errors, types

from recommender.agents.recommendation.prompts import build_recommendation_prompt
from recommender.config import settings
from recommender.schemas.products import Product
from recommender.utils.logging import get_logger, truncate_query

logger = get_logger(__name__)


class RecommendationErrorKind(str, Enum):
    TRANSPORT = "transport"
    API_REJECTED = "api_rejected"
    PARSE_FAILURE = "parse_failure"


class RecommendationError(Exception):
    """Any failure of a recommendation call."""

    def __init__(self, kind: RecommendationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.args[0]}"


# =============================================================================
# REPLY PARSING
# =============================================================================

def extract_json_array(text: str) -> str:
    """
    Return the substring from the first '[' to the last ']' (inclusive).

    Raises:
        RecommendationError: If there is no '[' or no ']' after it.
    """
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end < start:
        raise RecommendationError(
            RecommendationErrorKind.PARSE_FAILURE,
            "No JSON array found in model reply",
        )
    return text[start:end + 1]


def parse_recommended_ids(text: str) -> Set[int]:
    """
    Parse a model reply into the set of recommended product ids.

    Examples:
        >>> sorted(parse_recommended_ids("Here you go: [2, 7, 7, 9] enjoy!"))
        [2, 7, 9]

    Raises:
        RecommendationError: PARSE_FAILURE for a missing array, invalid JSON,
            a non-array payload, or any element that is not an integer.
    """
    candidate = extract_json_array(text)

    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise RecommendationError(
            RecommendationErrorKind.PARSE_FAILURE,
            f"Model reply is not valid JSON: {e}",
        ) from e

    if not isinstance(payload, list):
        raise RecommendationError(
            RecommendationErrorKind.PARSE_FAILURE,
            f"Expected a JSON array, got {type(payload).__name__}",
        )

    for item in payload:
        # bool is a subclass of int; true/false are not product ids
        if isinstance(item, bool) or not isinstance(item, int):
            raise RecommendationError(
                RecommendationErrorKind.PARSE_FAILURE,
                f"Expected integer ids, got {item!r}",
            )

    return set(payload)


def _extract_response_text(response: Any) -> str:
    """
    Get the reply text from a Gemini response.

    Reads the first candidate's text parts directly; response.text can be
    None even when parts carry text.
    """
    candidates = getattr(response, "candidates", None) or []
    if candidates:
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        texts = [part.text for part in parts if getattr(part, "text", None)]
        if texts:
            return "".join(texts)

    return response.text or ""


# =============================================================================
# CLIENT
# =============================================================================

class RecommendationClient:
    """
    Recommendation Client backed by Gemini.

    The API key is read once, when the client is built. No caching and no
    retries: the first failure is reported to the caller.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        timeout: Optional[float] = None,
        genai_client: Optional[genai.Client] = None,
    ):
        self.model = model
        self.timeout = timeout
        self._api_key = api_key
        self._genai_client = genai_client

    @classmethod
    def from_settings(cls) -> "RecommendationClient":
        return cls(
            api_key=settings.GOOGLE_API_KEY,
            model=settings.GEMINI_MODEL,
            timeout=settings.recommendation_timeout,
        )

    def _get_genai_client(self) -> genai.Client:
        """Lazy initialization of the Gen AI SDK client."""
        if self._genai_client is not None:
            return self._genai_client

        if not self._api_key:
            raise RecommendationError(
                RecommendationErrorKind.TRANSPORT,
                "GOOGLE_API_KEY not configured",
            )

        self._genai_client = genai.Client(api_key=self._api_key)
        logger.info("Gemini client initialized successfully for recommendations")
        return self._genai_client

    async def _generate(self, prompt: str) -> Any:
        client = self._get_genai_client()
        call = client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(temperature=0.2),
        )
        if self.timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self.timeout)

    async def recommend(self, query: str, catalog: Sequence[Product]) -> Set[int]:
        """
        Ask the model which catalog products match the query.

        Args:
            query: Non-empty user query
            catalog: Full product catalog embedded in the prompt

        Returns:
            Deduplicated set of product ids from the reply. Ids that match no
            catalog product are kept; the caller filters the catalog.

        Raises:
            RecommendationError: On transport, API or parse failure.
        """
        logger.info(f"recommend called, query='{truncate_query(query)}', catalog_size={len(catalog)}")
        prompt = build_recommendation_prompt(query, catalog)

        try:
            response = await self._generate(prompt)
        except RecommendationError:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini call timed out after {self.timeout}s")
            raise RecommendationError(
                RecommendationErrorKind.TRANSPORT,
                f"Model call timed out after {self.timeout}s",
            ) from e
        except errors.APIError as e:
            logger.error(f"Gemini API rejected the request: {e}")
            raise RecommendationError(
                RecommendationErrorKind.API_REJECTED,
                f"Model API error: {e}",
            ) from e
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            raise RecommendationError(
                RecommendationErrorKind.TRANSPORT,
                f"Model call failed: {e}",
            ) from e

        text = _extract_response_text(response)
        logger.info(f"Raw AI response: {text[:500]}")

        if not text.strip():
            raise RecommendationError(
                RecommendationErrorKind.PARSE_FAILURE,
                "Empty text in Gemini response",
            )

        ids = parse_recommended_ids(text)
        logger.info(f"Model recommended {len(ids)} product id(s)")
        return ids
