"""
WA Points API

FastAPI application for World Athletics points scoring.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wa_points import __version__
from wa_points.config import settings
from wa_points.api.v1.router import api_router
from wa_points.features.scoring import get_scoring_service


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup: load and verify the scoring tables before serving
    logger.info("Starting WA Points API...")
    service = get_scoring_service()
    logger.info(f"Scoring tables ready: {len(service.catalog)} events")

    yield

    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="WA Points API",
    description="World Athletics result and placing scores",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")
