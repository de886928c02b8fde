"""Rendering of service errors into the HTTP error envelope."""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exceptions import PaymentServiceError
from schemas import ExceptionMsg

logger = logging.getLogger(__name__)


def format_message(message: str) -> str:
    return f"#### {message}! ####"


def render_error(message: str, status: HTTPStatus = HTTPStatus.BAD_REQUEST) -> JSONResponse:
    body = ExceptionMsg(
        msg=format_message(message),
        http_status=status.name,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status.value,
        content=body.model_dump(mode="json", by_alias=True),
    )


def handle_api_request_exception(exc: Exception) -> JSONResponse:
    """Render ``exc`` as a 400 error envelope."""
    logger.warning("%s: %s", exc.__class__.__name__, exc)
    return render_error(str(exc))


async def _service_error_handler(request: Request, exc: PaymentServiceError) -> JSONResponse:
    return handle_api_request_exception(exc)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    logger.warning("Rejected request to %s: %s", request.url.path, details)
    return render_error(f"Invalid request: {details}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PaymentServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
