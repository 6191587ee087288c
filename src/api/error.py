"""Error translation for the HTTP layer

Maps use case error codes to HTTP statuses and renders every failure in the
response envelope {success: false, status, message, errors?}.
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from libs.result import Error

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Terjadi kesalahan pada server."
VALIDATION_FAILED_MESSAGE = "Validasi gagal"
DUPLICATE_DATA_MESSAGE = "Data sudah digunakan"

STATUS_BY_CODE: Dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "SELF_DELETE": status.HTTP_400_BAD_REQUEST,
    "UNSETTLED_DEBT": status.HTTP_400_BAD_REQUEST,
    "NO_ACTIVE_CYCLE": status.HTTP_400_BAD_REQUEST,
    "AMOUNT_MISMATCH": status.HTTP_400_BAD_REQUEST,
    "EXCESS_PAYMENT": status.HTTP_400_BAD_REQUEST,
    "NO_UNPAID_DEBT": status.HTTP_400_BAD_REQUEST,
    "DEBT_NOT_SETTLED": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "MISSING_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_REVOKED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "SESSION_SUPERSEDED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_ROLE": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "ADMIN_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEBT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CYCLE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PAYMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USERNAME_TAKEN": status.HTTP_409_CONFLICT,
    "EMAIL_TAKEN": status.HTTP_409_CONFLICT,
    "SETTLEMENT_CONFLICT": status.HTTP_409_CONFLICT,
}

MESSAGE_BY_TYPE = {
    "missing": "Field wajib diisi.",
    "extra_forbidden": "Field tidak dikenal.",
    "decimal_parsing": "Nominal harus berupa angka.",
    "decimal_type": "Nominal harus berupa angka.",
    "finite_number": "Nominal harus berupa angka.",
    "datetime_parsing": "Format tanggal tidak valid.",
    "datetime_from_date_parsing": "Format tanggal tidak valid.",
    "datetime_type": "Format tanggal tidak valid.",
    "date_parsing": "Format tanggal tidak valid.",
    "date_from_datetime_parsing": "Format tanggal tidak valid.",
    "enum": "Role harus SUPERADMIN atau ADMIN.",
    "json_invalid": "Format JSON tidak valid.",
}

LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def status_for(code: str) -> int:
    if code in STATUS_BY_CODE:
        return STATUS_BY_CODE[code]
    if code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    """Raised by routes to return a use case Error to the client"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error.code)

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        return cls(error)


def error_body(
    status_code: int, message: str, errors: Optional[Dict[str, List[str]]] = None
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "status": status_code, "message": message}
    if errors:
        body["errors"] = errors
    return body


def _field_name(loc) -> str:
    parts = list(loc)
    if parts and parts[0] in LOCATION_PREFIXES:
        parts = parts[1:]
    names = [str(part) for part in parts if isinstance(part, str)]
    return names[-1] if names else "body"


def _message(error: Dict[str, Any]) -> str:
    error_type = error.get("type", "")
    if error_type == "value_error":
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
    return MESSAGE_BY_TYPE.get(error_type, error.get("msg", VALIDATION_FAILED_MESSAGE))


def validation_errors(errors) -> Dict[str, List[str]]:
    """Group pydantic errors as {field: [messages]}"""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        messages = grouped.setdefault(_field_name(error.get("loc", ())), [])
        message = _message(error)
        if message not in messages:
            messages.append(message)
    return grouped


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.error.code} {exc.error.message} ({exc.error.reason})"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, GENERIC_ERROR_MESSAGE),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.error.message, exc.error.details),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            status.HTTP_400_BAD_REQUEST,
            VALIDATION_FAILED_MESSAGE,
            validation_errors(exc.errors()),
        ),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} hit a constraint: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(status.HTTP_409_CONFLICT, DUPLICATE_DATA_MESSAGE),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Endpoint tidak ditemukan." if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
