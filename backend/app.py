"""FastAPI application entry point for the YouTube age checker API."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import register_error_handlers
from services.cache import ResponseCache
from services.channel_service import ChannelService
from services.youtube import ChannelDirectory, YouTubeClient

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    directory: ChannelDirectory | None = None,
    cache: ResponseCache | None = None,
) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="YouTube Age Checker API", version="1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    if directory is None:
        directory = YouTubeClient(
            api_key=settings.youtube_api_key,
            base_url=settings.youtube_api_base_url,
            timeout=settings.upstream_timeout_seconds,
        )
    app.state.channel_service = ChannelService(directory, cache if cache is not None else ResponseCache())

    from routes.health import router as health_router
    from routes.channel import router as channel_router

    app.include_router(health_router)
    app.include_router(channel_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = settings.validate()
        if missing:
            logger.warning("Missing env vars (YouTube lookups will fail): %s", ", ".join(missing))

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)


if __name__ == "__main__":
    main()
