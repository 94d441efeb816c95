from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import traceback
import logging
from typing import Dict, Any, Optional

from civicgeo.middleware.request_id import get_request_id
from civicgeo.services.containment_service import InvalidCoordinatesError

logger = logging.getLogger("civicgeo.middleware.error_handler")


class ErrorDetail:
    """Standardized error payload."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_type: str,
        details: Optional[Any] = None
    ):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary."""
        error_dict = {
            "status_code": self.status_code,
            "message": self.message,
            "error_type": self.error_type,
        }

        request_id = get_request_id()
        if request_id:
            error_dict["request_id"] = request_id

        if self.details:
            error_dict["details"] = self.details

        return error_dict


def format_stack_trace(stack_trace: str) -> str:
    """Indent a stack trace so it reads as one block in the log."""
    return "\n".join(f"  │ {line}" for line in stack_trace.split("\n") if line.strip())


async def error_handler_middleware(request: Request, call_next):
    """
    Catch unhandled exceptions and answer with a JSON error payload.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        stack_trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(
            f"{request.method} {request.url.path} - {exc.__class__.__name__}: {exc}\n"
            f"{format_stack_trace(stack_trace)}"
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorDetail(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=str(exc),
                error_type=exc.__class__.__name__,
            ).to_dict()
        )


def setup_error_handlers(app):
    """
    Register exception handlers on the FastAPI application.
    """
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        """Handler for HTTP exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} - {exc.status_code} - {exc.detail}")
        else:
            logger.warning(f"{request.method} {request.url.path} - {exc.status_code} - {exc.detail}")

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorDetail(
                status_code=exc.status_code,
                message=str(exc.detail),
                error_type="http_exception",
            ).to_dict()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        """Handler for request validation errors."""
        validation_errors = exc.errors()
        logger.warning(f"Validation error on {request.method} {request.url.path}: {validation_errors}")

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorDetail(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                message="Invalid request data",
                error_type="validation_error",
                details=[
                    {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
                    for e in validation_errors
                ],
            ).to_dict()
        )

    @app.exception_handler(InvalidCoordinatesError)
    async def invalid_coordinates_handler(request, exc):
        """Handler for out-of-range report coordinates."""
        logger.warning(f"Invalid coordinates on {request.method} {request.url.path}: {exc}")

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorDetail(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                message="Invalid report location",
                error_type="invalid_coordinates",
                details=exc.errors,
            ).to_dict()
        )
