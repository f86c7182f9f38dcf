"""Pydantic request/response models for the filesort server API."""
from __future__ import annotations

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class ClassifyRequest(BaseModel):
    filenames: list[str]


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class RecordEntry(BaseModel):
    filename: str
    extension: str
    category: str
    priority: int


class CategoryEntry(BaseModel):
    extension: str
    category: str
    priority: int


class StatsResponse(BaseModel):
    total: int
    category_counts: dict[str, int]
    priority_counts: dict[int, int]
    category_percentages: dict[str, float]
    priority_percentages: dict[int, float]


class ReportResponse(BaseModel):
    records: list[RecordEntry]
    stats: StatsResponse


class HealthResponse(BaseModel):
    status: str
