# app/main.py
"""
Forklift Inspection API: middleware, error-to-status mapping and the /api/v1 routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from app.routers import inspections, fleet, forklifts, users, checklist, health
from app.database import create_tables
from app.config import settings
from app.services.errors import (
    InspectionAppError, NotFoundError, ValidationError, ConflictError, StorageError, StorageTimeoutError,
)
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Forklift Inspection API",
    description="Daily forklift checklist inspections, history and fleet status.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    X-API-Key (or ?api_key=) check for everything except health and the docs.
    Only installed when API_KEY is set.
    """
    async def dispatch(self, request: Request, call_next):
        open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}
        if request.url.path in open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Domain Error Handlers ────────────────────────────────────────────────────
_ERROR_STATUS = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ConflictError, status.HTTP_409_CONFLICT),
    (StorageTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(exc: InspectionAppError) -> int:
    for exc_type, code in _ERROR_STATUS:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(InspectionAppError)
async def app_error_handler(request: Request, exc: InspectionAppError):
    code = status_for(exc)
    if code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # The rejected input is left out: it may be a non-finite float JSON cannot carry
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(errors)},
    )


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(inspections.router, prefix="/api/v1", tags=["📝 Inspections"])
app.include_router(fleet.router,       prefix="/api/v1", tags=["📊 Fleet Status"])
app.include_router(forklifts.router,   prefix="/api/v1", tags=["🚜 Forklifts"])
app.include_router(users.router,       prefix="/api/v1", tags=["👤 Users"])
app.include_router(checklist.router,   prefix="/api/v1", tags=["✅ Checklist"])
app.include_router(health.router,      prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Forklift Inspection API starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"📊 Pending-defect window: {settings.PENDING_DEFECT_WINDOW_DAYS} days")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Forklift Inspection API shutting down...")
