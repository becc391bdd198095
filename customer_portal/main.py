"""
Customer Portal - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) wires middleware, exception handlers, routes and
       the static asset fallback, then returns the app. Settings are read
       once by the caller and stored on app.state.
Who:   uvicorn (`uvicorn customer_portal.main:app`) and `python -m customer_portal`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │   Req ID     │→│ Logging  │→│  GZip           │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  GET /   GET /api/customers[/{id}]                  │
    │  GET /api/health   GET /api/info                    │
    │  fallback: StaticFiles(public/)                     │
    │                                                     │
    │  Exception Handlers:                                │
    │  CustomerNotFound→404 │ HTTP 405→404 │ other→500    │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.routing import BaseRoute
from starlette.types import Scope

from customer_portal import __version__
from customer_portal.config import Settings
from customer_portal.exceptions import CustomerNotFoundError, NotFoundError
from customer_portal.middleware.logging import RequestIdLogFilter, RequestLoggingMiddleware
from customer_portal.middleware.request_id import RequestIDMiddleware
from customer_portal.routes import customers, health, home, info
from customer_portal.schemas.customer import ErrorResponse

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s
    Output goes to stdout so process managers and containers capture it.
    The handler carries RequestIdLogFilter, so every record written during a
    request shows that request's ID.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdLogFilter())
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # The access log middleware already records every request.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce port and environment.
    Shutdown: nothing to release; the record store lives until process exit.

    The port is only known when the process itself binds it
    (`python -m customer_portal`). Under an external `uvicorn ... --port`,
    uvicorn announces the bound address instead.
    """
    settings: Settings = app.state.settings
    setup_logging(settings)

    if app.state.port is not None:
        logger.info("🚀 Customer Portal running on port %d", app.state.port)
    else:
        logger.info("🚀 Customer Portal started")
    logger.info("📍 Environment: %s", settings.environment)
    logger.info("✅ Deployed using Platform Team's no-code modules")

    yield

    logger.info("Customer Portal shutting down")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        CustomerNotFoundError   → 404 {"success": false, "message": "Customer not found"}
        NotFoundError           → 404 {"success": false, "message": ...}
        HTTPException           → FastAPI default body; 405 collapsed into 404
        Exception (fallback)    → 500, stack trace logged server-side only
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        if isinstance(exc, CustomerNotFoundError):
            logger.warning("Customer lookup missed: id=%r", exc.raw_id)
        else:
            logger.warning("Not found: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(message=exc.message).model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Wrong methods on known paths are reported like unknown paths.
        if exc.status_code == 405:
            exc = StarletteHTTPException(status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(message="Internal server error").model_dump(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Static Assets
# ══════════════════════════════════════════════════════════════════════════

class RouteAwareStaticFiles(StaticFiles):
    """
    StaticFiles that never answers for a path owned by a defined route.

    The mount at "/" also receives requests whose path matches a route but
    whose method does not (HEAD /, POST /api/customers). Those get the same
    404 as without a static directory, instead of a file from disk.
    """

    def __init__(self, *, routes: Sequence[BaseRoute], **kwargs):
        super().__init__(**kwargs)
        self.routes = routes

    def owned_by_route(self, path: str) -> bool:
        return any(
            isinstance(route, APIRoute) and route.path_regex.match(path)
            for route in self.routes
        )

    async def get_response(self, path: str, scope: Scope) -> Response:
        if self.owned_by_route(scope["path"]):
            raise StarletteHTTPException(status_code=404)
        return await super().get_response(path, scope)


def mount_static_files(app: FastAPI, static_dir: str) -> None:
    """
    Serve files from `static_dir` for any path no route matched.

    Mounted at "/" after all routers. Starlette raises at request time if the
    directory is missing, so a missing directory simply means no static
    fallback.
    """
    directory = Path(static_dir)
    if not directory.is_dir():
        logger.debug("Static directory %s not found; static assets disabled", directory)
        return
    app.mount(
        "/",
        RouteAwareStaticFiles(routes=app.routes, directory=str(directory), html=True),
        name="static",
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None, port: Optional[int] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Process configuration. Loaded from the environment when
                  omitted; tests pass their own instance.
        port:     Port this process binds, when the caller binds it itself.
                  Only used for the startup log line.

    Paths are matched strictly: `/api/customers/` is a 404, with or without a
    static directory, rather than a redirect.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Customer Portal API",
        description="Read-only customer directory with a landing page and JSON API.",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.port = port

    # Middleware executes in REVERSE order of addition.
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(home.router)
    app.include_router(customers.router)
    app.include_router(health.router)
    app.include_router(info.router)

    mount_static_files(app, settings.static_dir)

    return app


def __getattr__(name: str):
    # `uvicorn customer_portal.main:app` resolves this on first access;
    # `python -m customer_portal` builds its own app and never touches it.
    if name == "app":
        app = create_app()
        globals()["app"] = app
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
