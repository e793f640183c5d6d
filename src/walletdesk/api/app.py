"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from walletdesk import __version__
from walletdesk.api.envelope import error_response
from walletdesk.circle import factory
from walletdesk.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(
        "walletdesk %s starting (environment=%s, circle=%s)",
        __version__,
        settings.environment,
        settings.circle_base_url,
    )
    yield
    logger.info("walletdesk stopped")


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Wrap body validation errors of API routes in the envelope."""
    if request.url.path.startswith("/api/"):
        return error_response(jsonable_encoder(exc.errors()), status_code=422)
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="walletdesk",
        description="Create and browse Circle wallet sets and wallets",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(factory.ServerContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes
    from walletdesk.api.routers import wallet_sets
    from walletdesk.api.routes import health
    from walletdesk.web import pages

    app.include_router(health.router, tags=["Health"])
    app.include_router(wallet_sets.router)
    app.include_router(pages.router, tags=["Pages"])

    return app


# Default app instance
app = create_app()
