"""API routers."""

try:
    from api.routers import images, imports, stores
except ImportError:
    from src.api.routers import images, imports, stores

__all__ = ["stores", "imports", "images"]
