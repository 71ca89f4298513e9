"""
HTTP exception handlers and process-level crash hooks.

Client mistakes map to 400, unknown routes to 404 and everything else to a
generic 500. Uncaught exceptions outside a request are logged; in
production they also terminate the process.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
import threading
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import Settings
from gateway.errors import ValidationError


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _malformed_body(request: Request, exc: RequestValidationError):
        if any(err.get("type") == "json_invalid" for err in exc.errors()):
            logger.error("Invalid JSON error on %s", request.url.path)
            return JSONResponse(status_code=400, content={"error": "Invalid JSON in request body"})
        logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            logger.info("404 Not Found: %s", request.url.path)
            message = "Resource not found"
        else:
            message = "Something went wrong!"
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message": message,
                "error": str(exc.detail) if settings.is_development else None,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "message": "Something went wrong!",
                "error": str(exc) if settings.is_development else None,
            },
        )


def _terminate_if_production(settings: Settings) -> None:
    if settings.is_production:
        logger.critical("Exiting after uncaught error (production mode)")
        os._exit(1)


def install_process_hooks(settings: Settings) -> Callable[[], None]:
    """Install crash hooks and return a callable that puts the previous ones back."""
    previous_excepthook = sys.excepthook
    previous_thread_excepthook = threading.excepthook

    def _excepthook(exc_type, exc, tb):
        logger.critical("Uncaught exception: %s", exc, exc_info=(exc_type, exc, tb))
        _terminate_if_production(settings)

    def _thread_excepthook(args: threading.ExceptHookArgs):
        logger.critical(
            "Uncaught exception in thread %s: %s",
            getattr(args.thread, "name", "?"),
            args.exc_value,
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )
        _terminate_if_production(settings)

    def restore() -> None:
        sys.excepthook = previous_excepthook
        threading.excepthook = previous_thread_excepthook

    sys.excepthook = _excepthook
    threading.excepthook = _thread_excepthook
    return restore


def install_loop_exception_handler(
    settings: Settings, loop: asyncio.AbstractEventLoop
) -> Callable[[], None]:
    previous_handler = loop.get_exception_handler()

    def _handler(loop: asyncio.AbstractEventLoop, context: dict):
        exc = context.get("exception")
        logger.error(
            "Unhandled error in event loop: %s",
            context.get("message"),
            exc_info=exc if isinstance(exc, BaseException) else None,
        )
        _terminate_if_production(settings)

    loop.set_exception_handler(_handler)
    return lambda: loop.set_exception_handler(previous_handler)
