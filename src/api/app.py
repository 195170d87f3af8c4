import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import images, imports, stores
from config import settings
from services.import_pipeline import get_enabled_stores

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    enabled = ", ".join(store.id.value for store in get_enabled_stores())
    logger.info(f"Import scrapers enabled for: {enabled}")
    async with httpx.AsyncClient(timeout=settings.image_fetch_timeout) as client:
        app.state.http_client = client
        yield
    app.state.http_client = None

app = FastAPI(
    title=settings.app_name,
    description="Import purchased clothing from online order histories",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Bookmarklets post from merchant origins
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(stores.router, prefix="/api/v1/stores", tags=["stores"])
app.include_router(imports.router, prefix="/api/v1/imports", tags=["imports"])
app.include_router(images.router, prefix="/api/v1", tags=["images"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
