"""
Error types and the HTTP error translator.

``register_exception_handlers`` installs one handler per error kind on
the FastAPI app, so all routes share the same status codes and body
shapes:

- ``EmployeeValidationError`` and request parsing errors -> 400 with a
  ``{field: message}`` map
- ``EmployeeNotFoundError`` -> 404 with ``{"detail": ...}``
- any ``SQLAlchemyError`` from the store -> 500 with a generic detail
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class EmployeeValidationError(Exception):
    """One or more employee fields failed validation."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(", ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


class EmployeeNotFoundError(Exception):
    """No employee is stored under the requested phone number."""

    def __init__(self, phone: str):
        super().__init__(f"Employee not found with phone number: {phone}")
        self.phone = phone


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "phone") or ("query", "phone"). A bare ("body",)
    # or a JSON decode offset means the body itself was unusable
    parts = [str(p) for p in loc[1:] if not isinstance(p, int)] or [str(loc[0])]
    return ".".join(parts)


async def handle_validation_error(request: Request, exc: EmployeeValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for err in exc.errors():
        errors.setdefault(_field_name(tuple(err.get("loc", ("body",)))), err.get("msg", "invalid value"))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def handle_not_found(request: Request, exc: EmployeeNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EmployeeValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(EmployeeNotFoundError, handle_not_found)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
