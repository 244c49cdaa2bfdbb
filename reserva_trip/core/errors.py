# reserva_trip/core/errors.py
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from reserva_trip.shared.database.errors import StoreError, StoreErrorKind
from reserva_trip.shared.schemas.common import Envelope

logger = logging.getLogger(__name__)

DB_ERROR_PLACEHOLDER = "Error de base de datos"
SERVER_ERROR_PLACEHOLDER = "Error del servidor"


class AppError(Exception):
    """Error de negocio con status HTTP asociado"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Error interno del servidor"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Datos de entrada inválidos"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Recurso no encontrado"


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Ya existe un registro con estos datos"


class InvalidReferenceError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Referencia inválida en los datos"


class InternalError(AppError):
    pass


STORE_ERROR_MAP = {
    StoreErrorKind.DUPLICATE: ConflictError,
    StoreErrorKind.INVALID_REFERENCE: InvalidReferenceError,
    StoreErrorKind.UNAVAILABLE: InternalError,
}


def from_store_error(error: StoreError) -> AppError:
    return STORE_ERROR_MAP[error.kind](detail=error.detail)


def _is_development(request: Request) -> bool:
    return request.app.state.settings.is_development


def error_response(
    request: Request,
    error: AppError,
    placeholder: Optional[str] = None
) -> JSONResponse:
    """Envelope de error; el detalle crudo solo se expone en development"""
    detail = None
    if error.detail:
        detail = error.detail if _is_development(request) else placeholder
    return Envelope.fail(error.message, error=detail).to_response(error.status_code)


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Error no manejado en {request.method} {request.url.path}")
    detail = str(exc) if _is_development(request) else SERVER_ERROR_PLACEHOLDER
    return Envelope.fail(InternalError.default_message, error=detail).to_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI):
    """Mapear todas las excepciones conocidas al envelope uniforme"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(request, exc)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return error_response(request, from_store_error(exc), DB_ERROR_PLACEHOLDER)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(detail=str(exc.errors()))
        return error_response(request, error, None)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Express respondía 404 también a métodos no soportados
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return Envelope.fail("Ruta no encontrada").to_response(status.HTTP_404_NOT_FOUND)
        return Envelope.fail(str(exc.detail)).to_response(exc.status_code)
