"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agreement_mapper import __version__
from agreement_mapper.api.v1 import agreements
from agreement_mapper.core.config import settings
from agreement_mapper.core.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.effective_log_level)
    logger = get_logger("startup")
    logger.info(
        "Application starting",
        env=settings.APP_ENV,
        document_timezone=settings.DOCUMENT_TIMEZONE or "local",
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="PDF Agreement Field Mapper",
    description="Maps onboarding applications to agreement PDF template fields",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"
app.include_router(agreements.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
