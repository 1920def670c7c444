"""Exception Handlers.

도메인/애플리케이션 예외를 표준 ErrorResponse로 변환합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product.application.common.exceptions import (
    ApplicationError,
    InvalidIdFormatError,
    InvalidRequestError,
)
from product.domain.exceptions import DomainError, ProductNotFoundError
from product.presentation.http.schemas import ErrorResponse, ValidationErrorDetail

logger = logging.getLogger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: str | None = None,
    validation_errors: list[ValidationErrorDetail] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=error,
        message=message,
        details=details,
        path=request.url.path,
        validation_errors=validation_errors or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def _validation_message(err: dict[str, Any], field: str) -> str:
    if err.get("type") == "string_too_short":
        return f"Parameter '{field}' is required"
    return err.get("msg", "Validation failed")


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        missing = [err for err in errors if err.get("type") == "missing"]
        if missing:
            field = str(missing[0]["loc"][-1])
            logger.warning("Missing request parameter", extra={"parameter": field})
            return _error_response(
                request,
                400,
                "BAD_REQUEST",
                f"Required parameter '{field}' is missing",
            )

        validation_errors = []
        for err in errors:
            field = str(err["loc"][-1])
            validation_errors.append(
                ValidationErrorDetail(
                    field=field,
                    rejected_value=err.get("input"),
                    message=_validation_message(err, field),
                )
            )
        logger.warning("Request validation error", extra={"errors": len(validation_errors)})
        return _error_response(
            request,
            422,
            "VALIDATION_ERROR",
            "Validation failure",
            details=(
                "One or more required parameters are missing or invalid. "
                "See validationErrors for details."
            ),
            validation_errors=validation_errors,
        )

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        logger.warning(f"Invalid request: {exc.message}")
        return _error_response(
            request,
            422,
            "INVALID_REQUEST",
            "Invalid request",
            details=exc.message,
        )

    @app.exception_handler(InvalidIdFormatError)
    async def invalid_id_format_handler(request: Request, exc: InvalidIdFormatError):
        logger.warning(f"Invalid argument: {exc.message}")
        return _error_response(
            request,
            400,
            "INVALID_ARGUMENT",
            "Invalid argument provided",
            details=exc.message,
            validation_errors=[
                ValidationErrorDetail(field="ids", rejected_value=exc.value, message=exc.message)
            ],
        )

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
        logger.warning(f"Product(s) not found: {exc.missing_ids}")
        return _error_response(
            request,
            404,
            "NOT_FOUND",
            "One or more products were not found",
            details=f"The following product ID(s) do not exist: {exc.missing_ids}",
            validation_errors=[
                ValidationErrorDetail(
                    field="ids",
                    rejected_value=product_id,
                    message=f"Product not found: {product_id}",
                )
                for product_id in exc.missing_ids
            ],
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning(f"Domain exception: {exc.message}")
        return _error_response(
            request,
            409,
            "BUSINESS_RULE_VIOLATION",
            "Business rule violation",
            details=exc.message,
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        logger.warning(f"Application error: {exc.message}")
        return _error_response(
            request,
            400,
            "APPLICATION_ERROR",
            "Invalid request",
            details=exc.message,
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unexpected error", exc_info=exc)
        return _error_response(
            request,
            500,
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred",
            details="Please contact support if the problem persists",
        )
