"""
AI Product Recommender.

Single-page web UI backed by FastAPI: a free-text shopping query is sent to
Gemini together with the product catalog, and the returned product ids are
rendered as product cards.
"""

__version__ = "0.1.0"
