from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging_setup import setup_logging
from .settings import get_settings
from .api.routes import router

logger = logging.getLogger(__name__)


def _envelope(code: str, message: str, hint: str | None = None) -> dict:
    return {"detail": {"error": {"code": code, "message": message, "hint": hint}}}


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Sentence Word-Reverser API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _request_diagnostics(request: Request, call_next):
        # No body logging.
        response = await call_next(request)
        if 400 <= response.status_code < 500:
            logger.warning(
                "client error: %s %s -> %s; origin=%r; ua=%r",
                request.method,
                request.url.path,
                response.status_code,
                request.headers.get("origin"),
                request.headers.get("user-agent"),
            )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Normalize errors into our ErrorEnvelope shape across all status codes.
        detail = exc.detail
        if isinstance(detail, dict) and "error" in detail:
            payload = {"detail": detail}
        else:
            payload = _envelope("HTTP_ERROR", str(detail) if detail else "Request failed.")

        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = first.get("msg", "Invalid request.")
        if loc:
            message = f"{loc}: {message}"
        return JSONResponse(
            status_code=422,
            content=_envelope("INVALID_REQUEST", message, 'Send JSON like {"text": "hello world"}.'),
        )

    app.include_router(router)

    return app


app = create_app()
