import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placelens import __version__
from placelens.api.routers import links, places
from placelens.config import settings
from placelens.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    configure_logging(settings.log_level)
    logger.info(f"Using model {settings.openai_model} at {settings.openai_api_base}")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; extraction requests will fail")
    yield

app = FastAPI(
    title=settings.app_name,
    description="Extract distinct places from short-form video and article signals",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(places.router, prefix="/api/v1/places", tags=["places"])
app.include_router(links.router, prefix="/api/v1/links", tags=["links"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
