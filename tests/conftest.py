"""Shared fixtures for unit and smoke tests."""

from contextlib import asynccontextmanager
from io import BytesIO
from typing import AsyncGenerator
import random
import sys
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

try:
    from api.routers import images, imports, stores
except ImportError:
    from src.api.routers import images, imports, stores


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="WardrobeImport Test",
        description="Import purchased clothing from online order histories",
        version="0.1.0",
        lifespan=test_lifespan,
    )

    app.include_router(stores.router, prefix="/api/v1/stores", tags=["stores"])
    app.include_router(imports.router, prefix="/api/v1/imports", tags=["imports"])
    app.include_router(images.router, prefix="/api/v1", tags=["images"])

    @app.get("/")
    async def root():
        return {
            "name": "WardrobeImport",
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


@pytest.fixture(scope="function")
def client(test_app: FastAPI):
    with TestClient(test_app) as test_client:
        yield test_client


def make_image_bytes(width: int, height: int, fmt: str = "PNG", noisy: bool = False) -> bytes:
    if noisy:
        # Random pixels defeat PNG compression, keeping the file large.
        pixels = random.Random(width * height).randbytes(width * height * 3)
        image = Image.frombytes("RGB", (width, height), pixels)
    else:
        image = Image.new("RGB", (width, height), color=(200, 40, 90))
    buffer = BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def small_png() -> bytes:
    return make_image_bytes(40, 30)


@pytest.fixture(scope="session")
def large_noisy_png() -> bytes:
    """A roughly 5 MB PNG with a 4:3 aspect ratio."""
    return make_image_bytes(1600, 1200, noisy=True)


@pytest.fixture
def envelope_payload() -> dict:
    return {
        "version": "1.0",
        "store": "myntra",
        "scrapedAt": "2024-03-01T10:00:00Z",
        "url": "https://www.myntra.com/my/orders",
        "items": [
            {
                "imageUrl": "https://assets.myntassets.com/h_720/1.jpg",
                "name": "Nike Men Running Shoes",
                "brand": "Nike",
                "price": 4995,
                "orderDate": "Delivered on Mon, 12 Feb",
                "size": "9",
            },
            {
                "imageUrl": "https://assets.myntassets.com/h_720/2.jpg",
                "name": "Roadster Men Navy Slim Fit Jeans",
                "size": "32",
            },
            {
                "imageUrl": "https://assets.myntassets.com/h_720/3.jpg",
                "name": "Fastrack Analog Watch",
                "size": "42mm",
                "currency": "USD",
                "price": "1,299",
            },
        ],
    }
