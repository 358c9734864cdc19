"""
frontgate.api.errors

Purpose:
    Exception types handlers may raise, plus the error taxonomy the normalizer
    works with. classify() is the only place that inspects raw error values;
    everything downstream matches on the taxonomy.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from frontgate.api.contracts.error_contract import ErrorCode


class ApiError(Exception):
    """Structured error carrying its own status, message and optional code."""

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{self.code or ErrorCode.HTTP_EXCEPTION.value}: {self.message}"


class NotFoundError(ApiError):
    def __init__(self, message: str = "Not Found", code: str | None = None) -> None:
        super().__init__(status_code=404, message=message, code=code)


# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StructuredHttpError:
    status_code: int
    code: str
    message: str


@dataclass(frozen=True)
class ResourceNotFound:
    code: str
    message: str
    status_code: int = 404


@dataclass(frozen=True)
class GenericError:
    message: str
    code: str = ErrorCode.ERROR.value
    status_code: int = 500


@dataclass(frozen=True)
class UnknownFailure:
    code: str = ErrorCode.UNKNOWN_ERROR.value
    status_code: int = 500


ClassifiedError = Union[StructuredHttpError, ResourceNotFound, GenericError, UnknownFailure]


def _message_text(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw or None
    if isinstance(raw, (list, tuple)):
        parts = [str(p) for p in raw if p not in (None, "")]
        return "; ".join(parts) or None
    return None


def _structured(status_code: int, code: Any, message: str) -> ClassifiedError:
    code = code if isinstance(code, str) and code else ErrorCode.HTTP_EXCEPTION.value
    if status_code == 404:
        return ResourceNotFound(code=code, message=message)
    return StructuredHttpError(status_code=status_code, code=code, message=message)


def _from_http_exception(exc: StarletteHTTPException) -> ClassifiedError:
    detail = exc.detail
    code: Any = None

    # detail may be a payload dict ({"code": ..., "message": ...}) or plain text.
    if isinstance(detail, dict):
        code = detail.get("code")
        message = _message_text(detail.get("message")) or _message_text(detail.get("detail"))
    else:
        message = _message_text(detail)

    return _structured(exc.status_code, code, message or "Http Exception")


def clean_validation_errors(errors: Any) -> list[str]:
    """
    Flatten Pydantic/FastAPI validation errors into stable client-facing lines.

    - Strip "Value error, " prefix
    - Rewrite missing required into "Missing required field: <field>."
    - Rewrite extra forbidden into "Unknown field: <field>."
    - Prefix everything else with the field location
    """
    if not isinstance(errors, (list, tuple)):
        return []

    lines: list[str] = []
    for err in errors:
        if not isinstance(err, dict):
            continue

        err_type = err.get("type")
        loc = err.get("loc") or ()
        msg = err.get("msg")

        if isinstance(msg, str) and msg.startswith("Value error,"):
            msg = msg[len("Value error,") :].lstrip()

        field_name = str(loc[-1]) if len(loc) >= 1 else None

        if err_type == "missing" and field_name:
            lines.append(f"Missing required field: {field_name}.")
        elif err_type == "extra_forbidden" and field_name:
            lines.append(f"Unknown field: {field_name}.")
        elif field_name and isinstance(msg, str):
            lines.append(f"{field_name}: {msg}")
        elif isinstance(msg, str):
            lines.append(msg)

    return lines


def classify(exc: object) -> ClassifiedError:
    """Map an arbitrary raised value onto the error taxonomy."""
    if isinstance(exc, ApiError):
        return _structured(exc.status_code, exc.code, exc.message or "Http Exception")

    if isinstance(exc, StarletteHTTPException):
        return _from_http_exception(exc)

    if isinstance(exc, RequestValidationError):
        lines = clean_validation_errors(exc.errors())
        return StructuredHttpError(
            status_code=422,
            code=ErrorCode.HTTP_EXCEPTION.value,
            message="; ".join(lines) or "Request validation failed",
        )

    if isinstance(exc, Exception):
        message = str(exc)
        if message:
            return GenericError(message=message)

    return UnknownFailure()
