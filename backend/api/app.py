"""FastAPI application."""

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.agents.orchestrator import RecommendationOrchestrator
from backend.agents.role_suggester import create_role_suggester
from backend.db.base import get_engine, get_session_factory, init_db
from backend.db.store import JobRoleStore
from backend.errors import NotFoundError, ProviderError, StoreError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

SKILLS_REQUIRED = "Skills array required"
PROVIDER_UNAVAILABLE = "AI service unavailable. Please try again later."
GENERIC_ERROR = "Something went wrong"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build long-lived services. Fails startup without an API key or a database."""
    suggester = create_role_suggester()
    init_db()
    logger.info("Database connected")

    app.state.store = JobRoleStore(get_session_factory())
    app.state.orchestrator = RecommendationOrchestrator(app.state.store, suggester)
    yield
    get_engine().dispose()


app = FastAPI(
    title="Job Role Recommender API",
    description="AI-suggested job roles for a skill set, with cached role details",
    version="0.1.0",
    lifespan=lifespan,
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(400, SKILLS_REQUIRED)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies get the same fixed 400 as an empty skills list."""
    logger.info(f"Rejected body on {request.url.path}: {exc.errors()}")
    return _error(400, SKILLS_REQUIRED)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(404, "Job not found")


@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
    logger.error(f"Provider error in {request.url.path}: {exc} ({exc.__cause__!r})")
    return _error(500, PROVIDER_UNAVAILABLE)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"Store error in {request.url.path}: {exc} ({exc.__cause__!r})")
    return _error(500, GENERIC_ERROR)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Wrong-method calls on known paths are unmatched routes too
    if exc.status_code in (404, 405):
        return _error(404, "Not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Server error in {request.url.path}")
    # Sent from outside the http middleware, so the headers are set here
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR}, headers=SECURITY_HEADERS)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log line plus hardened response headers."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# Import and include routers
from backend.api.routes import jobs, recommend  # noqa: E402

app.include_router(recommend.router, prefix="/recommend", tags=["Recommend"])
app.include_router(jobs.router, tags=["Jobs"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
