"""
Vaccine error handling.

The single place where registry failures become HTTP errors. Routes
unwrap Result values; a failed unwrap raises VaccineFaultError, which the
handlers registered here render into a uniform ErrorResponse body.

Dependencies: fastapi, sqlalchemy, vaccine_registry.core
System role: Fault to HTTP status translation
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from vaccine_registry.core.exceptions import (
    Fault,
    FaultKind,
    InvalidArgumentError,
    VaccineFaultError,
)
from vaccine_registry.models.common import ErrorBody, ErrorResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "invalid_request"
UNPROCESSABLE_STATUS = 422

FAULT_STATUS: dict[FaultKind, int] = {
    FaultKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    FaultKind.CONSTRAINT_VIOLATION: status.HTTP_400_BAD_REQUEST,
    FaultKind.DUPLICATE_KEY: status.HTTP_409_CONFLICT,
    FaultKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def fault_status(fault: Fault) -> int:
    """Status code for a fault kind."""
    return FAULT_STATUS[fault.kind]


def _validation_message(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def _error_response(status_code: int, kind: str, message: str, code: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(kind=kind, message=message, code=code))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_vaccine_error_handlers(app: FastAPI) -> None:
    """
    Register fault, contract-violation and store-failure handlers on the app.

    Mapping:
    - ConstraintViolation -> 400
    - DuplicateKey -> 409
    - NotFound -> 404
    - InvalidArgumentError -> 400
    - RequestValidationError -> 422 (schema rejection, same envelope)
    - SQLAlchemyError -> 500 (logged with traceback, details not leaked)
    """

    @app.exception_handler(VaccineFaultError)
    async def vaccine_fault_handler(request: Request, exc: VaccineFaultError):
        fault = exc.fault
        logger.warning(
            "Vaccine request rejected",
            extra={"path": request.url.path, "kind": fault.kind.value, "code": fault.code},
        )
        return _error_response(fault_status(fault), fault.kind.value, fault.message, fault.code)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.warning(
            "Invalid argument",
            extra={"path": request.url.path, "error": exc.message},
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            FaultKind.INVALID_ARGUMENT.value,
            exc.message,
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Store failure during vaccine operation",
            exc_info=exc,
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "store_error",
            "An internal error occurred during vaccine operation",
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Vaccine request failed schema validation",
            extra={"path": request.url.path, "errors": exc.errors()},
        )
        return _error_response(
            UNPROCESSABLE_STATUS,
            INVALID_REQUEST,
            _validation_message(exc),
        )
