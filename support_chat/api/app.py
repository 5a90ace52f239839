"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from support_chat.api.routes import error_response
from support_chat.api.routes import router as query_router
from support_chat.models.schemas import ErrorKind
from support_chat.relay.exceptions import RelayError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Support Chat API...")
    yield
    logger.info("Shutting down Support Chat API...")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return malformed request bodies in the same envelope as relay failures."""
    messages = "; ".join(
        f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning(f"Rejected request to {request.url.path}: {messages}")
    return error_response(
        messages or "Invalid request",
        ErrorKind.INVALID_REQUEST,
        status_code=422,
    )


async def relay_exception_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Envelope relay errors raised outside the route body, such as in dependencies."""
    logger.error(
        f"Relay failed before handling {request.url.path} ({exc.kind.value}): {exc.message}"
    )
    return error_response(exc.message, exc.kind)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Support Chat API",
        description=(
            "Customer support relay that answers questions using only the bundled "
            "knowledge documents, backed by the Gemini API."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(RelayError, relay_exception_handler)
    application.include_router(query_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "support-chat"}

    return application


app = create_app()
