"""Repository classes for domain-specific database operations."""

from .pageviews import PageviewRepository

__all__ = [
    "PageviewRepository",
]
