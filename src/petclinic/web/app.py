"""
PetClinic web application.

Builds the FastAPI application: database lifecycle, routers, and the
exception handlers that turn clinic errors into error pages.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from ..database import (
    SessionManager,
    create_engine,
    initialize_session_manager,
    seed_database,
)
from ..exceptions import (
    ConfigurationException,
    DatabaseException,
    EntityNotFoundException,
    PetClinicException,
    create_error_response,
    log_exception_context,
)
from ..models import Base
from ..utils.config import AppSettings, LoggingConfigurator
from .routers import owners, pets, system, vets, visits
from .templating import render

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the database on startup and release it on shutdown.

    A session manager supplied to ``create_app`` is used as is and left
    open at shutdown.
    """
    settings: AppSettings = app.state.settings
    owns_database = app.state.session_manager is None

    if owns_database:
        logger.info("Starting PetClinic")
        engine = create_engine(settings.database_url, echo=settings.sql_echo)
        manager = initialize_session_manager(engine)
        app.state.session_manager = manager

        if not await manager.initialize_database(Base.metadata):
            await manager.close_all_sessions()
            raise ConfigurationException(
                "Database initialization failed",
                config_key="database_url",
                config_value=settings.database_url,
            )

        if settings.seed_data:
            async with manager.get_session() as session:
                await seed_database(session)

        logger.info("PetClinic startup complete")

    yield

    if owns_database:
        logger.info("Shutting down PetClinic")
        await app.state.session_manager.close_all_sessions()


def _wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")


def _error_response(
    request: Request, exc: PetClinicException, status_code: int
) -> Response:
    if _wants_json(request):
        return JSONResponse(create_error_response(exc), status_code=status_code)
    return render(
        request,
        "error.html",
        {"status_code": status_code, "exception": exc},
        status_code=status_code,
    )


async def entity_not_found_handler(
    request: Request, exc: EntityNotFoundException
) -> Response:
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return _error_response(request, exc, 404)


async def clinic_error_handler(request: Request, exc: PetClinicException) -> Response:
    log_exception_context(
        exc, {"method": request.method, "path": request.url.path}, logger
    )
    return _error_response(request, exc, 500)


def create_app(
    settings: Optional[AppSettings] = None,
    session_manager: Optional[SessionManager] = None,
) -> FastAPI:
    """
    Create the PetClinic application.

    Args:
        settings: Runtime settings (read from the environment by default)
        session_manager: Ready session manager; when given, startup does not
            create an engine, the schema or seed data

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="PetClinic",
        description="Veterinary clinic owners, pets, visits and vets",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings.from_environment()
    app.state.session_manager = session_manager

    app.include_router(system.router)
    app.include_router(owners.router)
    app.include_router(pets.router)
    app.include_router(vets.router)
    app.include_router(visits.router)

    app.add_exception_handler(EntityNotFoundException, entity_not_found_handler)
    app.add_exception_handler(DatabaseException, clinic_error_handler)
    app.add_exception_handler(PetClinicException, clinic_error_handler)

    return app


def main() -> None:
    """Run the application with uvicorn using environment settings."""
    import uvicorn

    settings = AppSettings.from_environment()
    LoggingConfigurator.configure_basic_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
