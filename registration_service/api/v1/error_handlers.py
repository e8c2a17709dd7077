"""Map domain exceptions to HTTP responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ...domain.exceptions import (
    AuthenticationError,
    NotificationError,
    PersistenceError,
    RegistrationServiceError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    ValidationError: 422,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    PersistenceError: status.HTTP_503_SERVICE_UNAVAILABLE,
    NotificationError: status.HTTP_502_BAD_GATEWAY,
}


def status_for(exception: RegistrationServiceError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exception, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def registration_error_handler(
    request: Request, exception: RegistrationServiceError
) -> JSONResponse:
    status_code = status_for(exception)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exception.message}",
            exc_info=exception,
        )
    
    detail = {"message": exception.user_message}
    if isinstance(exception, ValidationError):
        detail["errors"] = exception.errors
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RegistrationServiceError, registration_error_handler)
