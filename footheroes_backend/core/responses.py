# responses.py
# Every response, success or failure, uses the same envelope:
#   { "success": bool, "data"?: ..., "error"?: str, "message"?: str }

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Location prefixes that carry no meaning for the client
_LOCATION_SOURCES = {"body", "query", "path", "header"}


def envelope(data: Any = None, message: Optional[str] = None) -> dict:
    """Success envelope. 'data' and 'message' are only present when given."""
    body = {"success": True}
    if data is not None:
        body["data"] = jsonable_encoder(data, by_alias=True)
    if message:
        body["message"] = message
    return body


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def format_validation_errors(exc: RequestValidationError) -> str:
    """'Validation error: field: msg, field: msg'"""
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part not in _LOCATION_SOURCES)
        msg = err.get("msg", "invalid value")
        problems.append(f"{field}: {msg}" if field else msg)
    return "Validation error: " + ", ".join(problems)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(400, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Full traceback stays in the server log only
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
