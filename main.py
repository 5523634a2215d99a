from contextlib import asynccontextmanager
import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from core.config import get_settings
from core.errors import SchemaError, StartupError
from core.logging_config import setup_logging
from dependencies import log_requests, setup_error_handlers
from routers import (
    auth_router,
    pages_router,
    users_router,
    posts_router,
    social_router
)
from store import Store

# Initialize settings and logging
settings = get_settings()
setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
logger = logging.getLogger(__name__)


def custom_generate_unique_id(route: APIRoute):
    return f"{route.tags[0] if route.tags else ''}-{route.name}"


def initialize_store(store: Store) -> None:
    try:
        store.initialize()
    except SchemaError as e:
        logger.critical(f"Error creating tables: {e}")
        raise StartupError("Could not initialize the database schema") from e


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Attach the store and make sure the schema exists"""
    store = getattr(app.state, "store", None)
    owns_store = store is None
    if owns_store:
        store = Store.from_settings(settings)
        app.state.store = store

    initialize_store(store)
    logger.info("Database ready")
    try:
        yield
    finally:
        if owns_store:
            store.dispose()
            app.state.store = None


def create_application(store: Store | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    When no store is given, one is built from the settings at startup.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url=settings.DOCS_URL,
        redoc_url=settings.REDOC_URL,
        openapi_tags=settings.OPENAPI_TAGS,
        lifespan=lifespan,
        generate_unique_id_function=custom_generate_unique_id,
    )
    app.state.store = store

    # Add middleware
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add error handlers
    setup_error_handlers(app)

    # Request metrics on /metrics
    Instrumentator().instrument(app)\
        .add(metrics.request_size())\
        .add(metrics.response_size())\
        .add(metrics.latency(buckets=[0.1, 0.5, 1.0, 2.0, 3.0, 4.0, 5.0]))\
        .add(metrics.requests(should_include_handler=True))\
        .expose(app, include_in_schema=True, should_gzip=True)

    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

    # Include routers
    app.include_router(pages_router, tags=["pages"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(users_router, tags=["users"])
    app.include_router(posts_router, tags=["posts"])
    app.include_router(social_router, tags=["social"])

    return app

# Create the FastAPI application
app = create_application()

@app.get("/health", response_class=PlainTextResponse)
async def health_check():
    """Health check endpoint for monitoring"""
    return "✨ OK"


def main():
    """Create the schema, optionally seed demo data and serve the API"""
    store = Store.from_settings(settings)
    try:
        initialize_store(store)
    except StartupError as e:
        logger.critical(f"Startup failed: {e}")
        sys.exit(1)

    if settings.SEED_DEMO_DATA:
        from seed_data import create_test_data
        create_test_data(store)

    app.state.store = store
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()
