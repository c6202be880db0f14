import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api.api import health, products
from products_api.config import Settings, get_settings
from products_api.database import Database
from products_api.exceptions import RequestValidationFailed

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("products_api.requests")

DESCRIPTION = """
REST API for a product catalogue:

- **List** every product
- **Get**, **update** and **delete** a product by ID
- **Create** products with a name and a positive price
- **Toggle** product availability

Invalid input is answered with `400 {"errors": [...]}` listing every failed rule;
unknown products with `404 {"error": "Producto no encontrado"}`.
"""


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


async def validation_failed_handler(request: Request, exc: RequestValidationFailed):
    return JSONResponse(
        status_code=400,
        content={"errors": [error.as_dict() for error in exc.errors]},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def log_requests(request: Request, call_next):
    """Log one line per request: method, path, status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    request_logger.info(
        "%s %s %s %.3f ms",
        request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The store client is created in the lifespan from `settings.DATABASE_URL`
    and exposed to the routes as `app.state.database`.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        logger.info("Starting up application...")

        database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        app.state.database = database

        # Keep serving even if the database is down; requests will fail until it is back
        try:
            logger.info("Creating database tables...")
            database.create_all()
            logger.info("Database tables created successfully")
        except SQLAlchemyError:
            logger.exception("Could not connect to the database")

        yield

        logger.info("Shutting down application...")
        database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description=DESCRIPTION,
        version=settings.APP_VERSION,
        openapi_tags=[
            {"name": "Products", "description": "API operations related to products"},
            {"name": "Health", "description": "Service health checks"},
        ],
        docs_url=None,
        lifespan=lifespan
    )

    app.add_exception_handler(RequestValidationFailed, validation_failed_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.middleware("http")(log_requests)

    # Only the configured frontend may call the API from a browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )

    app.include_router(products.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    @app.get("/docs", include_in_schema=False)
    def swagger_ui():
        return get_swagger_ui_html(openapi_url=app.openapi_url, title=settings.DOCS_TITLE)

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "redoc": "/redoc",
            "health": "/api/health"
        }

    return app


app = create_app()
