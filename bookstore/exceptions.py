"""
Errores propios de la API y su traducción a respuestas HTTP.

- EntityNotFoundError → 404 con el mensaje de la excepción.
- RequestValidationError (parámetros de ruta o query inválidos) → 400.
- HTTPException → conserva su código, con el mismo formato de cuerpo.

Cualquier otra excepción (p. ej. errores de conexión de SQLAlchemy) no se
captura aquí y termina en el manejador genérico (500).
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class EntityNotFoundError(Exception):
    """La entidad solicitada no existe en la base de datos."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReadOnlyTransactionError(RuntimeError):
    pass


def _error_body(status_code: int, message: str, errors=None) -> dict:
    body = {"status": status_code, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(status.HTTP_404_NOT_FOUND, exc.message),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Solo se exponen ubicación y mensaje de cada error
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            _error_body(status.HTTP_400_BAD_REQUEST, "Bad request", errors)
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
