"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stackit.config import Settings
from stackit.interface.api.routes import (
    answers,
    health,
    notifications,
    questions,
    tags,
    users,
)
from stackit.util.di.container import create_container, setup_di
from stackit.util.observability import instrument_fastapi


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": _jsonable_errors(exc)},
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serializable context from validation errors."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function: in
    production start_app.py does it, in tests conftest.py does.

    Args:
        container: DI container, defaults to the production container

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="StackIt API",
        description="Backend API for StackIt - a community Q&A platform",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,
    )

    app_instance.add_exception_handler(
        RequestValidationError,
        _validation_error_handler,  # type: ignore[arg-type]
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(users.router)

    return app_instance
