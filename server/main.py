"""FastAPI application — all endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("filesort.server")

from filesort.classify import classify_all, priority_of
from filesort.config import get_registry
from filesort.report import sort_by_priority, summarize
from server.models import (
    CategoryEntry,
    ClassifyRequest,
    HealthResponse,
    RecordEntry,
    ReportResponse,
    StatsResponse,
)


app = FastAPI(title="filesort", version="0.1.0")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.monotonic()
    response = await call_next(request)
    elapsed = time.monotonic() - start
    path = request.url.path
    if elapsed > 1.0:
        logger.warning(
            "%s %s %d — %.1fs", request.method, path, response.status_code, elapsed
        )
    elif request.method == "POST":
        logger.info(
            "%s %s %d — %.3fs", request.method, path, response.status_code, elapsed
        )
    return response


@app.get("/health", response_model=HealthResponse)
def health():
    return {"status": "ok"}


@app.get("/categories", response_model=list[CategoryEntry])
def list_categories():
    registry = get_registry()
    return [
        {"extension": ext, "category": cat, "priority": priority_of(cat)}
        for ext, cat in registry.items()
    ]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@app.post("/classify", response_model=list[RecordEntry])
def classify(body: ClassifyRequest):
    """Records in input order (unsorted)."""
    records = classify_all(body.filenames, get_registry())
    return [r.to_dict() for r in records]


@app.post("/report", response_model=ReportResponse)
def report(body: ClassifyRequest):
    records = sort_by_priority(classify_all(body.filenames, get_registry()))
    stats = summarize(records)
    logger.info("report: %d files, %d categories", stats.total, len(stats.category_counts))
    return ReportResponse(
        records=[RecordEntry(**r.to_dict()) for r in records],
        stats=StatsResponse(**stats.to_dict()),
    )
