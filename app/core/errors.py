from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Base for failures raised while serving a generate request.

    Every subclass maps to one HTTP status; the message is safe to show to
    the caller as-is.
    """

    status_code = 500
    code = "generation_failed"

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(GenerationError):
    code = "not_configured"


class InvalidOperation(GenerationError):
    status_code = 400
    code = "invalid_operation"


class InvalidPayload(GenerationError):
    status_code = 400
    code = "invalid_payload"


class ParseError(GenerationError):
    code = "invalid_json"


class SchemaViolation(GenerationError):
    code = "schema_violation"


class TransportError(GenerationError):
    code = "transport_failed"


def _message(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def attach_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GenerationError)
    async def _generation_error(request: Request, exc: GenerationError):
        return _message(exc.status_code, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else "Request failed."
        return _message(exc.status_code, detail, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = first.get("msg", "Invalid request body.")
        return _message(400, f"{location}: {detail}" if location else detail)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled: %s", exc)
        return _message(500, "An internal server error occurred")
