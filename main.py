from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from mortgage_quotes.config import settings
from mortgage_quotes.routers import calculator_router
from mortgage_quotes.services import MortgageCalculator, fallback_catalog_version
from mortgage_quotes.utils import setup_logging

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging()

    logger = logging.getLogger("mortgage_quotes.main")
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Fallback catalog version: {fallback_catalog_version()}")

    app.state.calculator = MortgageCalculator()
    logger.info("Created calculator instance")

    try:
        yield
    finally:
        logger.info("Shutting down application")
        app.state.calculator = None


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Mortgage quote engine behind the mortgage calculator widget",
    lifespan=lifespan,
    debug=settings.debug,
)

app.state.calculator = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.include_router(calculator_router)


@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "fallback_catalog_version": fallback_catalog_version(),
        "status": "operational",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "fallback_catalog_version": fallback_catalog_version(),
    }
