"""MAS Business OS seeder: FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mas_seed.config import get_settings
from mas_seed.pipelines.seed_pipeline import SeedPipeline
from mas_seed.routers.seed import router as seed_router
from mas_seed.services.mongo_service import MongoService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise the store and pipeline on startup; close the client on shutdown."""
    settings = get_settings()

    # ── MongoService ────────────────────────────────────────────────────
    mongo_service = MongoService.from_settings(settings)
    app.state.mongo_service = mongo_service
    if not await mongo_service.ping():
        logger.warning("MongoDB at %s is not reachable yet", settings.MONGODB_URL)

    # ── SeedPipeline (no interactive confirmation over HTTP) ────────────
    app.state.seed_pipeline = SeedPipeline(mongo_service, settings)
    if not settings.PROJECT_ID:
        logger.warning("PROJECT_ID is not set; seed runs will be rejected")

    yield

    # Shutdown
    await mongo_service.close()


app = FastAPI(
    title="MAS Business OS Seeder",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(seed_router, prefix="/api/seed", tags=["seed"])


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for service availability."""
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("mas_seed.main:app", host=_settings.BACKEND_HOST, port=_settings.BACKEND_PORT)
