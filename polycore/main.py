import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from polycore.api.health import router as health_router
from polycore.api.spa import router as spa_router
from polycore.api.subtitles import router as subtitles_router
from polycore.api.translate import router as translate_router
from polycore.api.video_info import router as video_info_router
from polycore.application.credentials import CredentialResolver
from polycore.application.serializers import error_envelope
from polycore.config import get_settings
from polycore.core.exceptions import PolyCoreError, ValidationError
from polycore.infrastructure.translation import close_openai_translators

log = logging.getLogger("polycore")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _log_banner() -> None:
    settings = get_settings()
    base_url = f"http://localhost:{settings.port}"
    log.info("PolyCore YouTube API server started")
    log.info("Server URL: %s", base_url)
    log.info("Health check: %s/api/health", base_url)
    log.info("Subtitles API: %s/api/subtitles", base_url)
    for provider, configured in CredentialResolver(settings).summary().items():
        log.info("Credential %s: %s", provider, "configured" if configured else "not configured")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    _log_banner()
    yield
    await close_openai_translators()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="PolyCore YouTube API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        log.warning("ValidationError on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.message))

    @app.exception_handler(PolyCoreError)
    async def polycore_error_handler(request: Request, exc: PolyCoreError):
        log.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.details)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        log.warning("Invalid request body on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=400, content=error_envelope("invalid request body"))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content=error_envelope("internal server error", str(exc)),
        )

    # Order matters: the SPA catch-all must stay last.
    app.include_router(subtitles_router)
    app.include_router(translate_router)
    app.include_router(video_info_router)
    app.include_router(health_router)
    app.include_router(spa_router)

    return app


app = create_app()
