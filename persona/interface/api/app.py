"""FastAPI application."""

from contextlib import asynccontextmanager
from pathlib import Path

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from persona.application.usecase.profile import SeedDefaultProfileUseCase
from persona.interface.api.routes import comments, health, pages, users, votes
from persona.util.di.container import create_container, setup_di
from persona.util.observability import instrument_fastapi

STATIC_DIR = Path(__file__).resolve().parents[1] / "web" / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the landing profile on startup and release the container on shutdown."""
    container = app.state.dishka_container
    async with container() as request_container:
        seed = await request_container.get(SeedDefaultProfileUseCase)
        seeded = await seed.execute()
        if seeded:
            logfire.info("Seeded default profile", profile_id=seeded.id)
    yield
    await container.close()


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of FastAPI's 422."""
    errors = exc.errors()
    detail = "Invalid request"
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        detail = f"{field or 'body'}: {errors[0].get('msg', 'invalid value')}"
    logfire.warn("Request validation failed", path=request.url.path, detail=detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to use; defaults to the production container

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py.
    """
    app_instance = FastAPI(
        title="Persona API",
        description="Personality profiles with community comments, likes and type votes",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(RequestValidationError, request_validation_handler)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    app_instance.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(pages.router)  # Catch-all /{profile_id}, keep last

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
