"""
FraudShield API Application

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fraudshield.api.routes import get_api_router
from fraudshield.config import get_settings
from fraudshield.services.detection import get_fraud_monitor
from fraudshield.utils.constants import APP_DESCRIPTION
from fraudshield.utils.exceptions import ValidationError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} API...")

    monitor = get_fraud_monitor()
    summary = monitor.engine.get_rule_summary()
    for category, counts in summary['by_category'].items():
        logger.info(
            f"  {category}: {counts['rules']} rules, {counts['safe_indicators']} safe indicators"
        )
    logger.info(f"Detection engine initialized with {summary['total_rules']} rules")
    logger.info(f"Fraud protection enabled: {monitor.is_enabled}")

    yield

    logger.info(f"{settings.app_name} API shutdown complete")


app = FastAPI(
    title="FraudShield API",
    description=APP_DESCRIPTION,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(get_api_router())


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


# Error handlers
@app.exception_handler(ValidationError)
async def validation_exception_handler(request, exc: ValidationError):
    """Invalid caller input."""
    return JSONResponse(status_code=400, content={"error": "Invalid request", "detail": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.debug else "An error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fraudshield.main:app", host=settings.host, port=settings.port, reload=settings.debug)
