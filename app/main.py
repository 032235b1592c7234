from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import httpx
from app.core.config import Settings, load_settings
from app.core.errors import UpstreamError, WinValidationError
from app.core.logging import configure_logging
from app.api.routes import health, wins
from app.services.upstream import RouteLLMClient
import logging

def create_app(settings: Settings | None = None, upstream: RouteLLMClient | None = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME)
    logger = logging.getLogger(__name__)

    # one upstream client per process, built from the startup settings
    app.state.settings = settings
    app.state.upstream = upstream if upstream is not None else RouteLLMClient(settings)

    # Registered before CORSMiddleware so CORS stays the outermost layer and
    # 413/500 diagnostics still carry the allow-origin headers.
    @app.middleware("http")
    async def guard_request(request: Request, call_next):
        declared = request.headers.get("content-length")
        if declared is not None:
            size = int(declared) if declared.isdigit() else 0
        else:
            # chunked upload: count the bytes actually sent
            size = len(await request.body())
        if size > settings.MAX_BODY_BYTES:
            logger.warning(f"Rejected {request.url.path}: body of {size} bytes")
            return PlainTextResponse("Request body too large", status_code=413)

        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"Unhandled error on {request.url.path}")
            return PlainTextResponse(str(exc), status_code=500)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Exception handlers: every failure ends the request with a plain-text diagnostic
    @app.exception_handler(WinValidationError)
    async def win_validation_handler(request: Request, exc: WinValidationError):
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(f"Upstream error on {request.url.path}: {exc.status_code}")
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(httpx.HTTPError)
    async def upstream_transport_handler(request: Request, exc: httpx.HTTPError):
        logger.error(f"Upstream unreachable on {request.url.path}: {type(exc).__name__}: {exc}")
        return PlainTextResponse(str(exc), status_code=500)

    # routes
    app.include_router(health.router)
    app.include_router(wins.router)
    return app
