from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from venue_compliance.config import get_settings
from venue_compliance.core.exceptions import ScoringConfigurationException
from venue_compliance.logging_config import configure_logging

# IMPORT ROUTERS
from venue_compliance.routers.health import router as health_router
from venue_compliance.routers.scoring import router as scoring_router

load_dotenv()

settings = get_settings()


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Compliance Scoring"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)


def _error_body(error_code: str, message: str, details: Optional[dict] = None) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# REGISTER EXCEPTION HANDLERS
@app.exception_handler(ScoringConfigurationException)
async def scoring_configuration_exception_handler(request: Request, exc: ScoringConfigurationException):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("SCORING_CONFIGURATION_ERROR", exc.message, {"source": exc.source}),
    )


@app.exception_handler(ValidationError)
async def form_validation_exception_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(
            "INVALID_INSPECTION_FORM",
            "Inspection form contains values that cannot be stored",
            {"errors": exc.errors(include_url=False, include_context=False)},
        ),
    )


# REGISTER ROUTERS
app.include_router(health_router)   # Health
app.include_router(scoring_router)  # Compliance Scoring


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    configure_logging(settings)
