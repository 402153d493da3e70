"""
API routers module.
"""
from app.api.activities import router as activities_router
from app.api.factors import router as factors_router
from app.api.recommendations import router as recommendations_router

__all__ = [
    "activities_router",
    "factors_router",
    "recommendations_router",
]
