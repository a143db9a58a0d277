from __future__ import annotations

import contextlib
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ecofly.api import api_router
from ecofly.config import settings
from ecofly.ingestors import OpenSkyIngestor
from ecofly.services.live_traffic import LiveTrafficPoller

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("ecofly")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown lifecycle."""

    poller = LiveTrafficPoller(OpenSkyIngestor())
    app.state.live_traffic_poller = poller
    if settings.enable_live_traffic_poller:
        poller.start()
    else:
        logger.info("Live traffic poller disabled; flights load on first request")

    try:
        yield
    finally:
        await poller.stop()


app = FastAPI(title="EcoFly Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Basic root endpoint for quick verification."""

    return {"message": "EcoFly backend is running. Try /healthz or /api/v1/airports"}
