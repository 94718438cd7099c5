"""FastAPI application entry point."""

import asyncio
import logging
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import text
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from structlog.contextvars import bound_contextvars

from translation_stats.api import admin
from translation_stats.api.v1.router import api_router
from translation_stats.config import get_settings
from translation_stats.constants import NONCE_HEADER
from translation_stats.dependencies import InfrastructureContainer
from translation_stats.errors import NonceVerificationError, PermissionDeniedError
from translation_stats.rate_limit import limiter
from translation_stats.templating import templates
from translation_stats.utils.logging import setup_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "translation-stats"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the options store and the transients cache for the app's lifetime."""
    settings = get_settings()
    logger.info(
        "Starting Translation Stats v%s environment=%s debug=%s",
        settings.plugin_version,
        settings.environment,
        settings.debug,
    )

    infra = InfrastructureContainer.from_settings(settings)
    app.state.engine = infra.engine
    app.state.session_factory = infra.session_factory
    app.state.redis = infra.redis

    yield

    logger.info("Shutting down Translation Stats...")
    try:
        await infra.close()
    except Exception:
        logger.exception("Error while closing the options store or cache")


# ---------------------------------------------------------------------------
# Middleware (pure ASGI)
# ---------------------------------------------------------------------------

# Incoming ids that are too long or not printable ASCII are replaced.
_MAX_REQUEST_ID_LENGTH = 128


def _is_token(value: str) -> bool:
    return value.isascii() and value.isprintable()


class RequestContextMiddleware:
    """Give every request an id and bind it, with method and path, to the logs."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        # Header bytes are not guaranteed to be UTF-8; latin-1 decodes any byte.
        incoming = dict(scope.get("headers", [])).get(b"x-request-id", b"").decode("latin-1")
        if incoming and len(incoming) <= _MAX_REQUEST_ID_LENGTH and _is_token(incoming):
            request_id = incoming
        else:
            request_id = uuid.uuid4().hex
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (b"x-request-id", request_id.encode()),
                ]
            await send(message)

        with bound_contextvars(
            request_id=request_id, method=scope["method"], path=scope["path"]
        ):
            await self.app(scope, receive, send_with_request_id)


# Admin responses carry nonces and per-user settings, so nothing is cached.
# Forms post only to this service and to the sponsor page on GitHub.
_ADMIN_HEADERS: list[tuple[bytes, bytes]] = [
    (b"cache-control", b"no-cache, must-revalidate, max-age=0, no-store, private"),
    (b"x-content-type-options", b"nosniff"),
    (b"x-frame-options", b"DENY"),
    (b"referrer-policy", b"strict-origin-when-cross-origin"),
    (
        b"content-security-policy",
        b"default-src 'self'; form-action 'self' https://github.com; frame-ancestors 'none'",
    ),
]

_HSTS = (b"strict-transport-security", b"max-age=63072000; includeSubDomains")


class AdminHeadersMiddleware:
    """Add no-cache and security headers to every response."""

    def __init__(self, app: ASGIApp, hsts: bool = False) -> None:
        self.app = app
        self.headers = [*_ADMIN_HEADERS, _HSTS] if hsts else list(_ADMIN_HEADERS)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                existing = {name for name, _ in message.get("headers", [])}
                message["headers"] = [
                    *message.get("headers", []),
                    *(h for h in self.headers if h[0] not in existing),
                ]
            await send(message)

        await self.app(scope, receive, send_with_headers)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


def _die(request: Request, message: str, status_code: int) -> Response:
    """Stop the request with *message*: JSON for the API, a bare page otherwise."""
    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=status_code, content={"detail": message})
    return templates.TemplateResponse(
        request, "die.html", {"message": message}, status_code=status_code
    )


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PermissionDeniedError)
    async def _permission_denied_handler(request: Request, exc: PermissionDeniedError):
        logger.warning("Permission denied capability=%s", exc.capability)
        return _die(request, exc.message, status.HTTP_403_FORBIDDEN)

    @app.exception_handler(NonceVerificationError)
    async def _nonce_failed_handler(request: Request, exc: NonceVerificationError):
        return _die(request, exc.message, status.HTTP_403_FORBIDDEN)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        # Let cancellation propagate; swallowing it breaks graceful shutdown
        if isinstance(exc, asyncio.CancelledError):
            raise
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


async def _check_options_store(request: Request) -> str:
    try:
        async with request.app.state.session_factory() as session:
            await session.execute(text("SELECT 1"))
    except Exception:
        logger.warning("Options store unavailable", exc_info=True)
        return "unavailable"
    return "ok"


async def _check_transients_cache(request: Request) -> str:
    try:
        await request.app.state.redis.ping()
    except Exception:
        logger.warning("Transients cache unavailable", exc_info=True)
        return "unavailable"
    return "ok"


def _register_health_routes(app: FastAPI, version: str) -> None:
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness check: is the process running?"""
        return {"status": "healthy", "service": SERVICE_NAME, "version": version}

    @app.get("/ready", tags=["Health"])
    async def readiness_check(request: Request):
        """Readiness check: can the settings be read and the cache cleared?"""
        checks = {
            "options": await _check_options_store(request),
            "transients": await _check_transients_cache(request),
        }
        ready = all(v == "ok" for v in checks.values())
        payload = {"status": "ready" if ready else "degraded", "checks": checks}
        if not ready:
            return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=payload)
        return payload


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_application() -> FastAPI:
    """Application factory."""
    settings = get_settings()
    setup_logging(
        settings.log_level,
        settings.log_format,
        service=SERVICE_NAME,
        version=settings.plugin_version,
    )

    app = FastAPI(
        title="Translation Stats",
        description="Settings screens for showing plugins translation stats.",
        version=settings.plugin_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]  # slowapi typing mismatch
    app.add_middleware(SlowAPIMiddleware)

    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["http://localhost:3000"],
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE"],
            allow_headers=["Authorization", "Content-Type", "X-Request-ID", NONCE_HEADER],
        )

    # Added last = outermost, so the request id is bound before anything logs.
    app.add_middleware(AdminHeadersMiddleware, hsts=settings.is_production)
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)
    _register_health_routes(app, settings.plugin_version)

    app.include_router(admin.router)
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_application()
