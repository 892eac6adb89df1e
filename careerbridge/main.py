import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careerbridge.config import settings
from careerbridge.core.errors import CareerBridgeError, ValidationError
from careerbridge.core.rate_limiter import rate_limiter
from careerbridge.database import Database
from careerbridge.logging_config import setup_logging
from careerbridge.routers import admin, applications, auth, jobs, profiles, saved_jobs, uploads

setup_logging()
logger = logging.getLogger(__name__)

PLACEHOLDER_SECRET = "replace-with-a-long-random-secret-key"
RATE_LIMITED_PATHS = {"/auth/login", "/auth/signup", "/auth/change-password"}

app = FastAPI(
    title="CareerBridge API",
    description="Accounts, company and candidate profiles, job postings, applications and uploads.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(profiles.router)
app.include_router(jobs.router)
app.include_router(applications.router)
app.include_router(saved_jobs.router)
app.include_router(admin.router)
app.include_router(uploads.router)


@app.exception_handler(CareerBridgeError)
async def careerbridge_error_handler(request: Request, exc: CareerBridgeError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.message)
    else:
        logger.info("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "error": exc.kind})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Schema failures share the validation_error shape with repo-level checks."""
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "request"
        problems.append(f"{field}: {err.get('msg', 'invalid')}")
    return await careerbridge_error_handler(request, ValidationError("; ".join(problems) or "Invalid request"))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.middleware("http")
async def apply_rate_limits(request: Request, call_next):
    path = request.url.path
    if request.method == "OPTIONS" or path not in RATE_LIMITED_PATHS:
        return await call_next(request)
    limit = settings.rate_limit_auth_per_min
    if limit > 0:
        client_ip = request.client.host if request.client else "unknown"
        allowed, retry_after = rate_limiter.allow(f"{client_ip}:{path}", limit=limit, window_seconds=60)
        if not allowed:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests. Please retry shortly."},
                headers={"Retry-After": str(retry_after)},
            )
    return await call_next(request)


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready(request: Request):
    try:
        request.app.state.database.ping()
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


@app.on_event("startup")
def on_startup():
    logger.info("Starting CareerBridge API")
    env = (settings.app_env or "development").lower()
    if settings.secret_key == PLACEHOLDER_SECRET:
        if env in {"production", "prod"}:
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
    if getattr(app.state, "database", None) is None:
        app.state.database = Database(settings.database_url)
    app.state.database.create_all()


@app.on_event("shutdown")
def on_shutdown():
    database = getattr(app.state, "database", None)
    if database is not None:
        database.dispose()
        app.state.database = None
    logger.info("CareerBridge API stopped")
