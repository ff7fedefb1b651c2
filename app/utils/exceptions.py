"""Error response builders and exception handlers"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import List, Optional
import traceback
from app.models.schemas import FieldError
from app.services.user_store import ErrorKind, StoreError
from app.utils.logger import logger
from app.utils.validation import to_field_errors

VALIDATION_FAILED_MESSAGE = "One or more validation errors occurred."

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_response(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    """Build an error response; Details is only present when given"""
    content = {"Message": message}
    if details is not None:
        content["Details"] = details
    return JSONResponse(status_code=status_code, content=content)


def store_error_response(error: StoreError) -> JSONResponse:
    """Map a store failure onto its HTTP status"""
    return error_response(STATUS_BY_KIND[error.kind], error.message)


def validation_error_response(errors: List[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "Message": VALIDATION_FAILED_MESSAGE,
            "Errors": [error.model_dump() for error in errors]
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request binding errors (bad path, query or body)"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return validation_error_response(to_field_errors(exc.errors()))


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle exceptions that escaped the route handlers"""
    logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}\n{traceback.format_exc()}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        str(exc)
    )
