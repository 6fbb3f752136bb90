import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..domain.errors import InternalFailureError, InvalidParameterError

logger = logging.getLogger(__name__)


async def invalid_parameter_handler(request: Request, exc: InvalidParameterError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def internal_failure_handler(request: Request, exc: InternalFailureError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(InternalFailureError())})


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors to ``{"error": message}`` JSON responses, never leaking internal detail."""
    app.add_exception_handler(InvalidParameterError, invalid_parameter_handler)
    app.add_exception_handler(InternalFailureError, internal_failure_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
