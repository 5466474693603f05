"""Seed API router: trigger seeding from the admin screen.

Endpoints
---------
GET  /modules   Available modules with their collections and record counts.
GET  /status    Which collections currently hold documents.
POST /run       Run the seeder; production targets require ``force``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pymongo.errors import PyMongoError

from mas_seed.models.seed import (
    CollectionStatus,
    ModuleSummary,
    SeedConfigurationError,
    SeedGraphError,
    SeedReport,
    SeedRunOptions,
    SeedValidationError,
)
from mas_seed.pipelines.seed_pipeline import SeedPipeline

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Seed"])

_CLIENT_ERRORS = (SeedConfigurationError, SeedValidationError, SeedGraphError)


# ── Helpers ────────────────────────────────────────────────────────

def _pipeline(request: Request) -> SeedPipeline:
    pipeline = getattr(request.app.state, "seed_pipeline", None)
    if pipeline is None:
        raise HTTPException(status_code=503, detail="Seed pipeline not initialised.")
    return pipeline


# ── GET /modules ───────────────────────────────────────────────────

@router.get("/modules", response_model=list[ModuleSummary], summary="List seed modules")
async def list_modules(request: Request) -> list[ModuleSummary]:
    try:
        return _pipeline(request).describe_modules()
    except _CLIENT_ERRORS as exc:
        raise HTTPException(status_code=400, detail=str(exc))


# ── GET /status ────────────────────────────────────────────────────

@router.get("/status", response_model=list[CollectionStatus], summary="Probe collections for data")
async def collection_status(request: Request) -> list[CollectionStatus]:
    try:
        return await _pipeline(request).status()
    except _CLIENT_ERRORS as exc:
        raise HTTPException(status_code=400, detail=str(exc))


# ── POST /run ──────────────────────────────────────────────────────

@router.post("/run", response_model=SeedReport, summary="Seed the configured project")
async def run_seed(body: SeedRunOptions, request: Request) -> SeedReport:
    """Clear (with ``reset``) and seed the selected modules.

    There is no interactive confirmation over HTTP, so a production target
    is rejected with 409 unless ``force`` is set.
    """
    pipeline = _pipeline(request)

    if pipeline.settings.is_production and not body.force:
        raise HTTPException(
            status_code=409,
            detail="Target environment is production; set force=true to seed it.",
        )

    try:
        report = await pipeline.run(body)
    except _CLIENT_ERRORS as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except PyMongoError as exc:
        logger.exception("Seed run failed")
        raise HTTPException(status_code=500, detail=f"Database operation failed: {exc}")

    logger.info(
        "Seed run via API: modules=%s total=%d dry_run=%s",
        ",".join(report.modules), report.total_records, report.dry_run,
    )
    return report
