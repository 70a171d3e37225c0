"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_catalog.api.config import (
    get_api_host,
    get_api_port,
    get_database_path,
    get_log_file,
    get_log_level,
)
from movie_catalog.api.routers import movies, genres, system
from movie_catalog.core.exceptions import CatalogError
from movie_catalog.database.init_db import init_database
from movie_catalog.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and make sure the schema exists."""
    setup_logging(log_file=get_log_file(), level=get_log_level())
    init_database(db_path=get_database_path())
    yield


app = FastAPI(
    title="Movie Catalog API",
    description="REST API for managing a catalog of movies and genres",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(genres.router)
app.include_router(system.router)


@app.exception_handler(CatalogError)
def catalog_error_handler(request: Request, exc: CatalogError):
    """Turn handler errors into {"detail": message} responses."""
    logger.warning("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed movie form or path values as 400; other routes keep 422."""
    if not request.url.path.startswith(movies.router.prefix):
        return await request_validation_exception_handler(request, exc)
    logger.warning("%s %s rejected (400): %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run():
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
