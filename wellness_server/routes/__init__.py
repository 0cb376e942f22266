"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .root import router as root_router
from .recommendations import router as recommendations_router
from .analysis import router as analysis_router
from .wellness import router as wellness_router
from .catalog import router as catalog_router
from .profiles import router as profiles_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(recommendations_router, prefix="/api", tags=["recommendations"])
    app.include_router(analysis_router, prefix="/api", tags=["analysis"])
    app.include_router(wellness_router, prefix="/api/wellness", tags=["wellness"])
    app.include_router(catalog_router, prefix="/api/catalog", tags=["catalog"])
    app.include_router(profiles_router, prefix="/api/profile", tags=["profiles"])
