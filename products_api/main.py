"""Products API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductApiError → JSON bodies (api/error_handlers.py)
    - CORS configured from settings: FRONT_URL plus the local front-end origin
    - Database connected once on startup via lifespan; a failure is logged, not fatal
    - Swagger UI served at /docs

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One access-log line per request from an HTTP middleware
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from products_api import __version__
from products_api.api.error_handlers import register_error_handlers
from products_api.api.routes import health, products
from products_api.config import get_settings
from products_api.infrastructure import database
from products_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("products_api.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await database.connect_db()
    logger.info("Products API started")
    yield
    await manager.dispose()
    logger.info("Products API shutting down")


app = FastAPI(
    title="Products REST API",
    description="API Docs for Production",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    openapi_tags=[
        {"name": "Products", "description": "API operations related to products"},
    ],
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def access_log_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {duration_ms}ms",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


app.include_router(health.router)
app.include_router(products.router)

register_error_handlers(app)
