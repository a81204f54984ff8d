# app/main.py
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app import models  # noqa: F401  (registers SQLAlchemy models)
from app.config import settings
from app.core.errors import GatewayError, ServiceError, ValidationError
from app.core.logging_config import logger, setup_logging
from app.core.rate_limit import limiter
from app.db import Base, engine
from app.middleware.request_id import RequestIdMiddleware
from app.observability.metrics import router as metrics_router
from app.routers import (
    admin_inbox,
    admin_recruitment,
    admin_settings,
    files,
    intake,
    jobs,
    uploads,
)
from app.schemas.validation import field_errors

setup_logging()

# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title="Workshop Intake", version="0.1.0")


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID", "unknown"
    )
    client_ip = request.client.host if request.client else "unknown"

    bound_logger = logger.bind(
        request_id=request_id,
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    response = await call_next(request)
    latency_ms = round((time.time() - start) * 1000, 2)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
        "request_finished"
    )
    return response


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
app.add_middleware(RequestIdMiddleware)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ----------------------------------------------------
# Error handlers
# ----------------------------------------------------
@app.exception_handler(ServiceError)
def service_error_handler(request: Request, exc: ServiceError):
    if isinstance(exc, GatewayError) and exc.status_code >= 500:
        logger.error("gateway_error", path=str(request.url.path), detail=exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    err = ValidationError(field_errors(exc.errors()))
    return JSONResponse(status_code=err.status_code, content=err.to_body())


@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", path=str(request.url.path))
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal error"})


@app.exception_handler(RateLimitExceeded)
def ratelimit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": "Too many requests, try again in a minute"},
    )


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(intake.router)
app.include_router(uploads.router)
app.include_router(jobs.router)
app.include_router(files.router)
app.include_router(admin_inbox.router)
app.include_router(admin_recruitment.router)
app.include_router(admin_settings.router)
if settings.metrics_enabled:
    app.include_router(metrics_router)  # /metrics


# ----------------------------------------------------
# Startup
# ----------------------------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("startup", service=settings.app_name, env=settings.app_env)
