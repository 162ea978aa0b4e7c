"""
Exception handlers for FastAPI.

- ApiError: status code and JSON body chosen by the route ({"msg"} or {"errors"})
- Request parsing errors: 400 {"errors": [...]} in the same shape as field checks
- Anything else: 500 plain-text "Server error"; details are logged server-side only
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from backend.app.core.errors import ApiError
from backend.app.core.logging_config import get_logger
from backend.app.core.validation import field_error

logger = get_logger("errors")

SERVER_ERROR_BODY = "Server error"


def _request_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        location = loc[0] if loc else "body"
        param = ".".join(loc[1:]) or None
        value = err.get("input")
        if not isinstance(value, (str, int, float, bool)):
            value = None
        errors.append(field_error(param, err.get("msg", "Invalid value"), value, location=location))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.payload, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = _request_errors(exc)
        logger.warning("Request validation failed path=%s errors=%s", request.url.path, len(errors))
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error path=%s error_type=%s error=%s",
            request.url.path,
            type(exc).__name__,
            str(exc),
        )
        return PlainTextResponse(SERVER_ERROR_BODY, status_code=500)
