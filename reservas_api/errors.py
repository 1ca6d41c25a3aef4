import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Error al procesar la solicitud"


class ApiError(Exception):
    """Failure reported to the client as HTTP 500 with a fixed message"""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def error_message(message: str) -> Callable:
    """Attach the client-facing message used when a request to the endpoint is rejected."""

    def decorate(endpoint: Callable) -> Callable:
        endpoint.error_message = message
        return endpoint

    return decorate


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """
    Log any exception raised inside the block and re-raise it as ApiError.

    The original error is only logged; clients get `message`.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise ApiError(message) from e


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Malformed bodies and path parameters get the same 500 body as any other
    failure. The validation details are only logged.
    """
    endpoint = request.scope.get("endpoint")
    message = getattr(endpoint, "error_message", DEFAULT_ERROR_MESSAGE)
    logger.warning(f"{message}: {request.method} {request.url.path} rejected: {exc.errors()}")
    return JSONResponse(status_code=ApiError.status_code, content={"error": message})
