"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ChannelAgeError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class InvalidChannelInputError(ChannelAgeError):
    def __init__(self, message: str = "Invalid channel URL or ID"):
        super().__init__(message, status_code=400)


class ChannelNotFoundError(ChannelAgeError):
    def __init__(self):
        super().__init__("Channel not found", status_code=404)


class UpstreamError(ChannelAgeError):
    """YouTube API call failed.

    Carries the upstream HTTP status when YouTube answered with one, so it can
    be forwarded to the caller. Network, timeout and body-decoding failures
    have no upstream status and surface as 500.
    """

    def __init__(self, message: str = "Could not fetch channel data", status_code: int = 500):
        super().__init__(message, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(ChannelAgeError)
    async def handle_channel_age_error(_request: Request, exc: ChannelAgeError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_request: Request, exc: RequestValidationError):
        logger.warning("Rejected request body: %s", exc.errors())
        return JSONResponse({"error": "Channel URL or ID is required"}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
