"""Exception handlers and request-logging middleware for FastAPI services."""

import time
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.requests import ClientDisconnect

from svcutil.exceptions import (
    BatchDeleteError,
    ChecksumMismatchError,
    EntropyError,
    SvcUtilError,
    TransportError,
)
from svcutil.logging_config import get_logger, setup_logging
from httpkit.responses import MessageError, json_message

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"

# Top-level packages whose module loggers create_app attaches a handler to.
LIBRARY_LOGGERS = ("svcutil", "filestore", "httpkit")


def _request_id(request: Request) -> str:
    return getattr(request.state, 'request_id', 'unknown')


async def message_error_handler(request: Request, exc: MessageError):
    logger.warning(
        f"Message error: {exc.message} status={exc.status_code} "
        f"[request_id={_request_id(request)}] path={request.url.path}"
    )
    return json_message(exc.message, exc.status_code)


async def checksum_mismatch_handler(request: Request, exc: ChecksumMismatchError):
    logger.warning(
        f"Checksum mismatch error: expected={exc.expected!r} actual={exc.actual} "
        f"[request_id={_request_id(request)}] path={request.url.path}"
    )
    return json_message("checksums do not match", status.HTTP_400_BAD_REQUEST)


async def transport_error_handler(request: Request, exc: TransportError):
    logger.warning(
        f"Transport error: {exc} [request_id={_request_id(request)}] path={request.url.path}"
    )
    return json_message("failed to read upload", status.HTTP_400_BAD_REQUEST)


async def client_disconnect_handler(request: Request, exc: ClientDisconnect):
    logger.warning(
        f"Client disconnected mid-request [request_id={_request_id(request)}] path={request.url.path}"
    )
    return json_message("failed to read upload", status.HTTP_400_BAD_REQUEST)


async def batch_delete_error_handler(request: Request, exc: BatchDeleteError):
    logger.error(
        f"Batch delete error ({len(exc.failures)} failures): {exc} "
        f"[request_id={_request_id(request)}] path={request.url.path}"
    )
    return json_message("failed to delete files", status.HTTP_500_INTERNAL_SERVER_ERROR)


async def entropy_error_handler(request: Request, exc: EntropyError):
    logger.critical(
        f"Entropy error: {exc} [request_id={_request_id(request)}] path={request.url.path}",
        exc_info=exc
    )
    return json_message(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def svcutil_exception_handler(request: Request, exc: SvcUtilError):
    logger.error(
        f"svcutil exception: {exc} [request_id={_request_id(request)}] path={request.url.path}",
        exc_info=exc
    )
    return json_message(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def os_error_handler(request: Request, exc: OSError):
    logger.error(
        f"Filesystem error: {exc} [request_id={_request_id(request)}] path={request.url.path}",
        exc_info=exc
    )
    return json_message(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Validation error: {exc.errors()} [request_id={_request_id(request)}] path={request.url.path}"
    )
    message = "invalid request"
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg', message)}" if field else first.get("msg", message)
    return json_message(message, 422)


def install_error_handlers(app: FastAPI) -> None:
    """
    Register JSON message handlers for svcutil errors on app.

    Responses carry a fixed message; details such as paths only go to the log.
    """
    app.add_exception_handler(MessageError, message_error_handler)
    app.add_exception_handler(ChecksumMismatchError, checksum_mismatch_handler)
    app.add_exception_handler(TransportError, transport_error_handler)
    app.add_exception_handler(ClientDisconnect, client_disconnect_handler)
    app.add_exception_handler(BatchDeleteError, batch_delete_error_handler)
    app.add_exception_handler(EntropyError, entropy_error_handler)
    app.add_exception_handler(SvcUtilError, svcutil_exception_handler)
    app.add_exception_handler(OSError, os_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)


def install_request_logging(app: FastAPI) -> None:
    """
    Log every request and response and tag responses with X-Request-ID.
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
        )

        response = await call_next(request)

        duration = time.time() - start_time

        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
        )

        response.headers["X-Request-ID"] = request_id

        return response


def create_app(title: str, component_name: str = "httpkit") -> FastAPI:
    """
    Create a FastAPI app with svcutil logging, middleware and error handlers.

    Args:
        title: Application title
        component_name: Logger name configured for the service, in addition
            to the svcutil, filestore and httpkit package loggers

    Returns:
        FastAPI application with a /health endpoint; callers add their own routes
    """
    for name in dict.fromkeys(LIBRARY_LOGGERS + (component_name,)):
        setup_logging(name)

    app = FastAPI(title=title)
    install_request_logging(app)
    install_error_handlers(app)

    @app.get("/health")
    async def health_check():
        """
        Health check endpoint.
        Returns 200 if service is alive.
        """
        return {"status": "healthy", "service": title}

    return app
