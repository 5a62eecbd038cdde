"""Mock Interview FastAPI Application Entry Point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from mockinterview.config import settings
from mockinterview.db import async_session_factory, init_db
from mockinterview.exception_handlers import register_exception_handlers
from mockinterview.middleware import configure_logging, register_middleware
from mockinterview.routers import (
    answers_router,
    auth_router,
    interviews_router,
    questions_router,
)
from mockinterview.schemas import HealthResponse
from mockinterview.services.question_bank import seed_question_bank

SERVICE_NAME = "mockinterview-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    configure_logging()
    logger.info(
        "Application starting",
        environment=settings.environment,
        debug=settings.debug,
    )
    await init_db()
    if settings.seed_question_bank:
        async with async_session_factory() as session:
            await seed_question_bank(session)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Mock Interview API",
    description="Timed mock interviews with heuristic answer evaluation",
    version=VERSION,
    lifespan=lifespan,
)

register_middleware(app)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth_router, prefix="/api")
app.include_router(questions_router, prefix="/api")
app.include_router(interviews_router, prefix="/api")
app.include_router(answers_router, prefix="/api")


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=VERSION,
    )
