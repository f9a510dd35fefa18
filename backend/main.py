"""Food Rescue Map — FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI

from utils.config import CORS_ORIGINS, LOG_LEVEL

# Geocoder calls and record create/delete are logged at INFO
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("rescue_core").setLevel(LOG_LEVEL)
from fastapi.middleware.cors import CORSMiddleware

from api.add_flow import router as add_flow_router
from api.geocoding import router as geocoding_router
from api.locations import router as locations_router
from api.map import router as map_router
from api.routes import router
from rescue_core.provider import close_geocoder
from schemas.health import HealthResponse

app = FastAPI(
    title="Food Rescue Map",
    description="Crowdsourced map of food-rescue locations: markers, list/search, add flow with geocoding",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes under /api (no static mount at / so /api is never shadowed)
app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(map_router, prefix="/api")
app.include_router(add_flow_router, prefix="/api")
app.include_router(geocoding_router, prefix="/api")


@app.get("/api/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """Explicit health route so /api/health is always available."""
    return HealthResponse()


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")


@app.on_event("shutdown")
async def shutdown() -> None:
    """Close the geocoder HTTP client."""
    await close_geocoder()


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "food-rescue-map", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
