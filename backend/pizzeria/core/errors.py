"""
Error taxonomy for the API and its mapping onto HTTP responses.

Handlers raise these exceptions; the handlers registered by
`register_exception_handlers` turn them into JSON bodies of the form
{"error": <message>, "code": <CODE>}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from tortoise.exceptions import BaseORMException

logger = logging.getLogger("uvicorn.error")


class ApiError(Exception):
    """Base class for errors that map onto a specific HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    default_message = "Error interno del servidor."

    def __init__(self, message: str | None = None, *, reason: str | None = None):
        self.message = message or self.default_message
        # Internal detail for logs only, never sent to the client
        self.reason = reason
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Datos de entrada inválidos."


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"
    default_message = "El recurso ya existe."


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_REQUIRED"
    default_message = "Acceso no autorizado. Se requiere un token."


class InvalidCredentials(Unauthenticated):
    code = "INVALID_CREDENTIALS"
    default_message = "Credenciales inválidas."


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "AUTH_INVALID_TOKEN"
    default_message = "Token inválido o expirado."


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Recurso no encontrado."


class InternalError(ApiError):
    pass


def error_body(exc: ApiError) -> dict:
    return {"error": exc.message, "code": exc.code}


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[errors] %s %s -> %s (%s)", request.method, request.url.path, exc.code, exc.reason)
    elif exc.reason:
        logger.info("[errors] %s %s -> %s (%s)", request.method, request.url.path, exc.code, exc.reason)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Framework-level validation (non-JSON body, non-integer id) is reported as a plain 400
    logger.info("[errors] %s %s -> invalid request: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(ValidationError()),
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[errors] %s %s -> unexpected failure", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(InternalError()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the taxonomy-to-HTTP mapping to an application."""
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(BaseORMException, _unexpected_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
