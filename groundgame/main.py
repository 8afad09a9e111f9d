"""FastAPI application entry point."""

from contextlib import asynccontextmanager
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from groundgame.config import get_settings
from groundgame.engine.scoring import ScoringError
from groundgame.engine.session import get_session
from groundgame.logging_config import setup_logging, get_logger
from groundgame.routers import observability, zones, simulate

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: an invalid catalog raises here and the service refuses to start
    logger.info("Starting campaign opportunity API...")
    session = get_session()
    logger.info(f"Catalog loaded: {len(session.zones)} zones, {len(session.segments)} segments")
    yield
    logger.info("Shutting down campaign opportunity API...")


settings = get_settings()

app = FastAPI(
    title="GroundGame",
    description="Territorial opportunity scoring and vote projection for ground campaigns",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request timing middleware
@app.middleware("http")
async def log_request_timing(request: Request, call_next):
    """Log the time taken for each API request."""
    start_time = time.time()

    logger.info(f"→ API_REQUEST | {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time

    status_emoji = "✓" if response.status_code < 400 else "✗"
    logger.info(
        f"{status_emoji} API_RESPONSE | {request.method} {request.url.path} | "
        f"status={response.status_code} | duration={duration:.3f}s"
    )

    return response


@app.exception_handler(ScoringError)
async def scoring_error_handler(request: Request, exc: ScoringError):
    """A corrupted ranking is never returned; report the failing zone."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "zone_id": exc.zone_id},
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(observability.router, prefix="/v1", tags=["Observability"])
app.include_router(zones.router, prefix="/v1", tags=["Zones"])
app.include_router(simulate.router, prefix="/v1", tags=["Simulation"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "GroundGame",
        "version": "0.1.0",
        "description": "Campaign opportunity scoring and simulation",
    }
