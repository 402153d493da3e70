"""
FastAPI application factory following kkb_fastapi pattern.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

from app.api import activities_router, factors_router, recommendations_router
from app.core.config import get_config
from app.core.exceptions import ActivityNotFoundError
from app.database.base import get_db_url, get_engine_kw
from app.database.session_manager.db_session import Database
from app.database.session_manager.exceptions import DatabaseTransactionError
from app.services.recommendations.text_generation import TextGenerationClient

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(activities_router)
    app.include_router(factors_router)
    app.include_router(recommendations_router)


def register_exception_handlers(app: FastAPI):
    """Map domain and infrastructure errors to HTTP responses."""

    @app.exception_handler(ActivityNotFoundError)
    async def activity_not_found_handler(request: Request, exc: ActivityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Activity not found"},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logging.error(f"HTTPException occurred: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": jsonable_encoder(exc.errors()),
                "message": "Validation error",
            },
        )

    @app.exception_handler(DBAPIError)
    @app.exception_handler(DatabaseTransactionError)
    async def database_exception_handler(request: Request, exc: Exception):
        logging.error(f"Database error occurred: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Service temporarily unavailable"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logging.error(f"Exception occurred: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Initialises the database session manager and the text generation client.
    """
    logging.info("Application startup")
    async_db_url = get_db_url(app.state.config)

    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
    logging.info("Initialized database")

    TextGenerationClient.init(app.state.config)

    try:
        yield
    finally:
        await TextGenerationClient.close()
        await Database.close()
        logging.info("Application shutdown")


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)
    api_settings = config.section("api")

    app = FastAPI(
        title=api_settings.get("title", "Carbon Footprint Tracker API"),
        description=api_settings.get(
            "description", "Personal carbon footprint tracking service"
        ),
        version=api_settings.get("version", "1.0.0"),
        debug=api_settings.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config

    register_routers(app)
    register_exception_handlers(app)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": app.title,
            "version": app.version,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "carbon-footprint-tracker"}

    # Set up CORS middleware
    origins = [
        "http://localhost:3000",  # For local development
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
