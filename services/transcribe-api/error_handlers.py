"""Renders every failed request as ``{"error": message}``."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from speech_recap_common.logging import setup_logging
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = setup_logging()

REQUIRED_FIELD_MESSAGES = {
    "file": "No file provided",
    "language": "No language provided",
}


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = str(error.get("loc", ("",))[-1])
        if error.get("type") == "missing" and field in REQUIRED_FIELD_MESSAGES:
            messages.append(REQUIRED_FIELD_MESSAGES[field])
        else:
            messages.append(f"Invalid {field}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages) or "Invalid request"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _validation_message(exc)
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "reason": message},
    )
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Installs the error renderers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
