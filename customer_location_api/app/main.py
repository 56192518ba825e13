"""
Main entrypoint for the Customer Location API.

This module assembles the FastAPI application, sets up logging, creates
the in-memory store and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn customer_location_api.app.main:app --reload

Every response, including errors, uses the
``{statusCode, message, result}`` envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import messages
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router
from .schemas.response import ApiResponse


def _envelope(status_code: int, message: str) -> JSONResponse:
    body = ApiResponse(status_code=status_code, message=message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds a new app with its own empty store, so tests can
    create isolated instances.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # routers can log from the start.
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    init_store(app)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return _envelope(status.HTTP_400_BAD_REQUEST, messages.DATA_FORMAT)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.INTERNAL_ERROR)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
