from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import structlog

logger = structlog.get_logger()


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "success": False,
            "status_code": status_code
        },
        headers=headers,
    )


def format_validation_error(exc: RequestValidationError) -> str:
    """Render the first validation error as ``field: reason``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    reason = first.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {reason}" if location else reason


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_error(exc)
    logger.warning(
        "Request validation failed",
        detail=message,
        path=request.url.path,
        method=request.method
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        path=request.url.path,
        method=request.method
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
