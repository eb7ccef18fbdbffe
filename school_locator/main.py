"""FastAPI application routes, middleware, and metrics."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from school_locator.config import get_settings
from school_locator.health.health_check import is_redis_available
from school_locator.logging_config import logger
from school_locator.models.health import Dependencies, HealthResponse
from school_locator.models.school import RankedSchool, School
from school_locator.school_service.schools import add_school, list_schools
from school_locator.storage.store import SchoolStore, StorageFailure, build_redis_client
from school_locator.validation.validator import FieldError, ValidationError
from structlog.contextvars import bind_contextvars, clear_contextvars


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the process-wide school store and close it on shutdown."""
    settings = get_settings()
    client = build_redis_client(settings)
    app.state.store = SchoolStore(client)
    logger.info("STARTUP", redis_host=settings.redis_host, redis_port=settings.redis_port)
    try:
        yield
    finally:
        client.close()


app = FastAPI(lifespan=lifespan)

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["path"]
)


def get_store(request: Request) -> SchoolStore:
    """Return the school store created at startup."""
    return request.app.state.store


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Log request details, attach a request ID, and record metrics.

    Args:
        request: Incoming HTTP request.
        call_next: FastAPI handler for the next middleware/app.

    Returns:
        The response produced by the downstream handler.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
    finally:
        duration_s = time.perf_counter() - start
        duration_ms = round(duration_s * 1000, 2)
        status_code = getattr(response, "status_code", 500)
        logger.info(
            "HTTP_REQUEST",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
        REQUEST_COUNT.labels(
            method=request.method, path=request.url.path, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(path=request.url.path).observe(duration_s)
        clear_contextvars()


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Convert validation errors into 400 responses with per-field detail.

    Args:
        request: Incoming HTTP request.
        exc: Raised validation error.

    Returns:
        A JSON response listing each field and the reason it was rejected.
    """
    logger.info("VALIDATION_FAILED", errors=[e.model_dump() for e in exc.errors])
    return JSONResponse(
        status_code=400, content={"detail": [e.model_dump() for e in exc.errors]}
    )


@app.exception_handler(StorageFailure)
async def storage_failure_handler(request: Request, exc: StorageFailure):
    """Convert storage failures into opaque 500 responses.

    Args:
        request: Incoming HTTP request.
        exc: Raised storage failure.

    Returns:
        A JSON response with the operation's generic error message.
    """
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/")
async def root():
    """Return a basic liveness response."""
    return {"message": "School locator is running"}


@app.post("/addSchool", status_code=201)
async def add_school_route(
    request: Request, store: SchoolStore = Depends(get_store)
) -> School:
    """Register a new school.

    Args:
        request: Request whose JSON body holds name, address, latitude and
            longitude.
        store: Injected school store.

    Returns:
        The stored school with its identifier.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise ValidationError(
            [FieldError(field="body", reason="must be valid JSON")]
        ) from exc
    return add_school(payload, store)


@app.get("/listSchools")
async def list_schools_route(
    request: Request, store: SchoolStore = Depends(get_store)
) -> list[RankedSchool]:
    """List every school, nearest to the query coordinate first.

    Args:
        request: Request carrying latitude and longitude query parameters.
        store: Injected school store.

    Returns:
        Ranked schools, each with its distance in km.
    """
    return list_schools(request.query_params, store)


@app.get("/health", response_model=HealthResponse)
async def health(store: SchoolStore = Depends(get_store)) -> HealthResponse:
    """Report API health and dependency availability.

    Returns:
        A HealthResponse containing dependency status.
    """
    return HealthResponse(
        status="ok",
        dependencies=Dependencies(redis=is_redis_available(store)),
    )


@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics for scraping."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
