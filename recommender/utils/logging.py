"""
Logging utilities for the AI Product Recommender.

Provides standardized logger configuration.

Rules:
- NEVER log the Google API key or any other secret
- Log user queries truncated (first 50 characters)
- Raw model replies and caught exceptions are developer-facing only;
  they are never shown to the user
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from recommender.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def truncate_query(query: str, limit: int = 50) -> str:
    """Shorten a user query for log lines."""
    if len(query) <= limit:
        return query
    return query[:limit] + "..."
