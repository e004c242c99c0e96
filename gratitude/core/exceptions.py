import logging
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.requests import Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from gratitude.rpc.status import RpcResult, StatusCode

logger = logging.getLogger(__name__)

# ---------------------------
# Gateway errors
# ---------------------------

class GatewayError(Exception):
    """Base class for errors the gateway reports to the presentation layer."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "internal error"):
        self.message = message
        super().__init__(message)

class InvalidArgumentError(GatewayError):
    """Raised when a backend rejected the caller's input."""
    status_code = status.HTTP_400_BAD_REQUEST

class InternalError(GatewayError):
    """Raised when a backend failed; the message is already generic."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

class UnavailableError(GatewayError):
    """Raised when a backend could not be reached."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

class DeadlineExceededError(GatewayError):
    """Raised when a backend call ran past its deadline."""
    status_code = status.HTTP_504_GATEWAY_TIMEOUT


_ERRORS_BY_CODE = {
    StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
    StatusCode.UNAVAILABLE: UnavailableError,
    StatusCode.DEADLINE_EXCEEDED: DeadlineExceededError,
}


def unwrap(result: RpcResult):
    """Value of an ``Ok`` result; an ``Err`` becomes the matching gateway error."""
    if result.ok:
        return result.value
    raise _ERRORS_BY_CODE.get(result.code, InternalError)(result.message)


def error_body(message: str) -> dict:
    return {"ok": False, "error": message}


# ---------------------------
# FastAPI Exception Handlers
# ---------------------------

def register_exception_handlers(app):
    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown routes and wrong methods
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("invalid request"),
        )
