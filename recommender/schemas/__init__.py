"""
Pydantic schemas for the catalog, the view state and API payloads.

All FastAPI endpoints use strict Pydantic models with explicit types.
"""
