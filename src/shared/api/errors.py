"""Exception-to-response mapping shared by every service's HTTP surface.

Route handlers raise; these handlers translate. Bodies are always
``{"message": ...}``, with an ``errors`` list added for validation failures.
Unexpected exceptions are logged and surface as a generic 500.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException

from shared.exceptions import AuthenticationError, PermissionDenied, UpstreamError
from shared.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _raw_messages(exc: Exception):
    messages = getattr(exc, "messages", None)
    if messages:
        return messages
    if exc.args:
        return exc.args[0]
    return str(exc)


def _message_of(exc: Exception) -> str:
    """Flatten whatever an exception carries into one human-readable line."""
    raw = _raw_messages(exc)
    if isinstance(raw, dict):
        parts = []
        for value in raw.values():
            if isinstance(value, list | tuple):
                parts.extend(str(v) for v in value)
            else:
                parts.append(str(value))
        return "; ".join(parts)
    if isinstance(raw, list | tuple):
        return "; ".join(str(v) for v in raw)
    return str(raw)


def _field_errors(raw) -> list[dict]:
    if isinstance(raw, dict):
        errors = []
        for field, value in raw.items():
            values = value if isinstance(value, list | tuple) else [value]
            errors.extend({"field": field, "message": str(v)} for v in values)
        return errors
    return [{"field": None, "message": str(raw)}]


def _validation_response(errors: list[dict]) -> JSONResponse:
    message = errors[0]["message"] if len(errors) == 1 else "Validation failed"
    return JSONResponse(status_code=400, content={"message": message, "errors": errors})


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "form")]
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages raised from custom validators
        message = message.removeprefix("Value error, ")
        errors.append({"field": ".".join(loc) or None, "message": message})
    return _validation_response(errors)


async def handle_domain_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _validation_response(_field_errors(_raw_messages(exc)))


async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": _message_of(exc)})


async def handle_invalid_operation(request: Request, exc: InvalidOperationError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"message": _message_of(exc)})


async def handle_authentication(request: Request, exc: AuthenticationError) -> JSONResponse:
    logger.debug("Request rejected: unauthenticated", path=request.url.path, reason=exc.reason)
    return JSONResponse(status_code=401, content={"message": exc.message})


async def handle_permission_denied(request: Request, exc: PermissionDenied) -> JSONResponse:
    return JSONResponse(status_code=403, content={"message": exc.message})


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


async def handle_upstream(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(
        "Upstream service call failed",
        path=request.url.path,
        service=exc.service,
        upstream_status=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while processing request",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the shared exception mapping on ``app``."""
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ValidationError, handle_domain_validation)
    app.add_exception_handler(ObjectNotFoundError, handle_not_found)
    app.add_exception_handler(InvalidOperationError, handle_invalid_operation)
    app.add_exception_handler(AuthenticationError, handle_authentication)
    app.add_exception_handler(PermissionDenied, handle_permission_denied)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(UpstreamError, handle_upstream)
    app.add_exception_handler(Exception, handle_unexpected)
