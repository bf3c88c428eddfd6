
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)

class MovieServiceException(Exception):
    """Base exception for the application"""
    pass

class ServiceUnavailableException(MovieServiceException):
    pass

class DatastoreFault(ServiceUnavailableException):
    """Connection loss or statement failure reported by the database driver"""
    pass

async def global_exception_handler(request: Request, exc: Exception):
    """
    Anything not mapped to a status code above ends here as a 500.
    The traceback goes to the log only, never into the response body.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "The movie request could not be completed.",
            "request_id": request_id
        },
    )

async def service_unavailable_handler(request: Request, exc: ServiceUnavailableException):
    """
    Datastore faults are not retried; the client gets a 503 and may try again.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        "Datastore unavailable",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=503,
        content={
            "error": "Service Unavailable",
            "message": "The movie store is temporarily unavailable.",
            "request_id": request_id
        },
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    404 for unknown movies, 400 for a movie that was not persisted, plus any
    routing errors raised by Starlette.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})
    else:
        logger.info(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "request_id": request_id},
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Malformed ids or bodies; the pydantic error list is echoed to the client.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info("Validation error", extra={"request_id": request_id, "errors": exc.errors()})

    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation Error",
            "details": jsonable_encoder(exc.errors()),
            "request_id": request_id
        },
    )

