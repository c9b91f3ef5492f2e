"""Pydantic models for query-string parsing."""

from pydantic import BaseModel


class ViewParams(BaseModel):
    domain: str | None = None
    page: str | None = None


class StatsParams(BaseModel):
    # Exact match when present, even if empty
    domain: str | None = None
