"""
Exception handlers that render domain errors as JSON responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from frappuccino.core.errors import FrappuccinoError, MissingFieldsError

logger = logging.getLogger(__name__)


def field_name(loc) -> str:
    """Render a pydantic error location as ``ingredients[0].quantity``."""
    name = ""
    for part in loc[1:] or loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name += f".{part}" if name else str(part)
    return name


async def frappuccino_error_handler(request: Request, exc: FrappuccinoError) -> JSONResponse:
    """Answer with the status carried by the error and its message as ``detail``."""
    logger.warning(
        "%s on %s %s: %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc.message,
    )
    content = {"detail": exc.message}
    if isinstance(exc, MissingFieldsError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request values in the same field map as MissingFieldsError."""
    errors = {field_name(error["loc"]): error["msg"] for error in exc.errors()}
    return await frappuccino_error_handler(request, MissingFieldsError(errors))


def configure_exception_handlers(app: FastAPI) -> None:
    """Register the domain and request-validation handlers on the application."""
    app.add_exception_handler(FrappuccinoError, frappuccino_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
