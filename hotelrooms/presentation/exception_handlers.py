from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hotelrooms.core.errors import InvalidDataError, InvalidIdError, NotFoundError
from hotelrooms.schemas.models import ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Erro de validação"


def _error_response(
        status_code: int,
        message: str,
        request: Request,
        errors: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning("%s %s -> 404: %s", request.method, request.url.path, exc)
    return _error_response(404, str(exc), request)


async def invalid_data_handler(request: Request, exc: InvalidDataError) -> JSONResponse:
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc)
    return _error_response(400, str(exc), request)


async def invalid_id_handler(request: Request, exc: InvalidIdError) -> JSONResponse:
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc)
    return _error_response(400, str(exc), request)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # drop the "body"/"path"/"query" prefix
        field = ".".join(loc[1:]) or ".".join(loc)
        errors.setdefault(field, error.get("msg", ""))

    logger.warning("%s %s -> 400: invalid request %s", request.method, request.url.path, errors)
    return _error_response(400, VALIDATION_FAILED, request, errors)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidDataError, invalid_data_handler)
    app.add_exception_handler(InvalidIdError, invalid_id_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
