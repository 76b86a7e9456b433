"""
Athlete Minds

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from athlete_minds.api.middleware.request_id import RequestIdMiddleware
from athlete_minds.api.routes import router as api_router
from athlete_minds.config import Settings, get_settings
from athlete_minds.kernel.errors import (
    AppError,
    BadRequestError,
    DuplicateUsernameError,
    ValidationFailed,
)
from athlete_minds.kernel.events.event_store import EventStore
from athlete_minds.kernel.identity.identity_service import IdentityService
from athlete_minds.kernel.seed import seed_sample_data
from athlete_minds.kernel.store import RecordStore
from athlete_minds.kernel.validation import FieldError, field_errors
from athlete_minds.logging_config import configure_logging, get_logger
from athlete_minds.schemas.common import ErrorResponse, FieldErrorResponse, HealthResponse

logger = get_logger(__name__)


def _cors_headers(request: Request) -> dict:
    """CORS headers for responses built outside CORSMiddleware (unhandled 500s)."""
    origin = request.headers.get("origin")
    if not origin or origin not in request.app.state.settings.cors_origins:
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Vary": "Origin",
    }


def _error_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: Optional[List[FieldError]] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """JSON error body with the request id echoed in body and header."""
    headers = dict(headers or {})
    req_id = getattr(request.state, "request_id", None)
    if req_id:
        headers["X-Request-ID"] = req_id
    body = ErrorResponse(
        detail=detail,
        errors=[FieldErrorResponse(**e.as_dict()) for e in errors] if errors is not None else None,
        request_id=req_id,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _path_param_label(name: str) -> str:
    """story_id -> "story ID"."""
    if name.endswith("_id"):
        return name[: -len("_id")].replace("_", " ") + " ID"
    return name.replace("_", " ")


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Domain errors carry their own status code."""
        errors = exc.errors if isinstance(exc, ValidationFailed) else None
        return _error_response(request, exc.status_code, exc.message, errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Framework-raised errors such as 404 for unknown routes or 405."""
        return _error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ):
        """Shape failures are client errors: 400, one entry per offending field."""
        errors = exc.errors()
        path_errors = [e for e in errors if e.get("loc", ("",))[0] == "path"]
        if path_errors:
            name = str(path_errors[0]["loc"][-1])
            return await app_error_handler(
                request, BadRequestError(f"Invalid {_path_param_label(name)}")
            )
        return await app_error_handler(request, ValidationFailed(field_errors(errors)))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Unexpected failures: log everything, tell the client nothing."""
        logger.exception("Unhandled exception: %s", exc)
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            headers=_cors_headers(request),
        )


def _register_admin(store: RecordStore, events: EventStore, settings: Settings) -> None:
    if not (settings.admin_username and settings.admin_password):
        return
    identity = IdentityService(store, events, bcrypt_rounds=settings.bcrypt_rounds)
    try:
        identity.register_user(settings.admin_username, settings.admin_password)
    except DuplicateUsernameError:
        logger.warning("Admin user already exists", extra={"username": settings.admin_username})


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    event_store: Optional[EventStore] = None,
) -> FastAPI:
    """
    Build the application.

    A store passed in is used as-is; otherwise a fresh one is created and,
    when enabled, filled with the sample resources and stories.
    """
    settings = settings or get_settings()
    event_store = event_store if event_store is not None else EventStore()

    if store is None:
        store = RecordStore()
        if settings.seed_sample_data:
            seed_sample_data(store)
        _register_admin(store, event_store, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        configure_logging(
            log_level=settings.log_level,
            environment=settings.environment,
            debug=settings.debug,
        )
        logger.info(
            "Starting %s v%s",
            settings.project_name,
            settings.version,
            extra={"records": app.state.store.counts()},
        )
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title=settings.project_name,
        description="Resources, recovery stories and story moderation for injured athletes.",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.event_store = event_store

    # Last added = outermost: CORS wraps the request-id middleware
    app.add_middleware(RequestIdMiddleware, slow_request_ms=settings.slow_request_ms)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request):
        """Check application health."""
        return HealthResponse(
            status="ok",
            version=settings.version,
            records=request.app.state.store.counts(),
        )

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()


# Main entry point for development
if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "athlete_minds.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.debug,
    )
