"""FastAPI application: lifecycle and routes."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from content_toolkit.routes import (
    analysis_router,
    articles_router,
    assets_router,
    pinterest_router,
)
from content_toolkit.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("app_started")
    yield


app = FastAPI(
    title="Recipe Content Toolkit",
    description="Competitor analysis, SEO recipe articles and social assets generated with Gemini",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(analysis_router)
app.include_router(articles_router)
app.include_router(assets_router)
app.include_router(pinterest_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
