"""API route modules."""
from content_toolkit.routes.analysis import router as analysis_router
from content_toolkit.routes.articles import router as articles_router
from content_toolkit.routes.assets import router as assets_router
from content_toolkit.routes.pinterest import router as pinterest_router

__all__ = [
    "analysis_router",
    "articles_router",
    "assets_router",
    "pinterest_router",
]
