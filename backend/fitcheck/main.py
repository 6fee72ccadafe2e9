"""
Fit Check API

FastAPI application for the furniture fit-checking engine.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from fitcheck.config import get_settings
from fitcheck.core.fit_checker import FitChecker
from fitcheck.core.rules import load_rules
from fitcheck.models.api import ErrorResponse, HealthResponse
from fitcheck.routes import fit_check


# Get settings
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the rules once; a bad rules file stops startup (RuleConfigError)."""
    rules = load_rules(settings.rules_path)
    app.state.fit_checker = FitChecker(rules)
    logger.info("%s %s ready", settings.app_name, settings.app_version)
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    **Fit Check API** - Validates furniture arrangements against a room.

    ## Checks
    - **Boundaries / Overlaps**: items must fit the room and not collide (errors)
    - **Clearances**: spacing between items and around doors/windows (warnings)
    - **Relationships**: per room type distances, e.g. sofa to coffee table (warnings)
    - **Accessibility**: walkway width for the requested level (errors)
    - **Safety**: tip-over risks for child-safe rooms (warnings)

    ## Workflow
    1. Inspect the active rules → `/api/v1/fit-checker/rules`
    2. Submit room geometry and furniture → `/api/v1/fit-check`
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(fit_check.router, prefix=settings.api_prefix)


# ============ Request Logging ============

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method, request.url.path, response.status_code, duration_ms,
    )
    return response


# ============ Error Envelopes ============

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed room/furniture payloads."""
    body = ErrorResponse(
        error="Invalid request payload",
        details=jsonable_encoder(exc.errors()),
    )
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


# ============ Health Check ============

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        message="Fit Check API is running. Visit /docs for API documentation."
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        version=settings.app_version
    )


# ============ Run with Uvicorn ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fitcheck.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
