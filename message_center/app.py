"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from message_center import __version__
from message_center.config import Settings
from message_center.errors import (
    InvalidOperationError,
    MessageNotFoundError,
    ValidationFailedError,
)
from message_center.store import InMemoryMessageRepository, MessageRepository

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    repo: MessageRepository = app.state.repository
    logger.info("message_center_started", messages=len(repo.list()))
    yield
    logger.info("shutdown_complete")


def _install_error_handlers(app: FastAPI) -> None:
    """Translate the error taxonomy into ``{"error": ...}`` JSON bodies."""

    @app.exception_handler(MessageNotFoundError)
    async def _not_found(request: Request, exc: MessageNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Message not found"},
        )

    @app.exception_handler(InvalidOperationError)
    async def _invalid_operation(request: Request, exc: InvalidOperationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    @app.exception_handler(ValidationFailedError)
    async def _validation_failed(request: Request, exc: ValidationFailedError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed", "details": exc.details},
        )

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, exc: RequestValidationError):
        details = [
            f"{'.'.join(str(p) for p in err['loc'][1:]) or 'request'}: {err['msg']}"
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed", "details": details},
        )

    @app.exception_handler(Exception)
    async def _internal_error(request: Request, exc: Exception):
        logger.exception("unhandled_error", path=request.url.path, method=request.method)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": "Request failed"},
        )


def create_app(
    settings: Settings | None = None,
    repository: MessageRepository | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    The repository is created here rather than in the lifespan so each app
    instance starts from freshly seeded fixture data.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Message Center API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository = repository or InMemoryMessageRepository.seeded()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        with structlog.contextvars.bound_contextvars(
            method=request.method,
            path=request.url.path,
        ):
            return await call_next(request)

    from message_center.routers.messages import router as messages_router
    from message_center.routers.reference import router as reference_router

    app.include_router(messages_router, prefix=settings.api_prefix)
    app.include_router(reference_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "message-center"}

    return app
