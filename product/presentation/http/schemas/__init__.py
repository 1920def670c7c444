"""HTTP Schemas."""

from product.presentation.http.schemas.error import ErrorResponse, ValidationErrorDetail
from product.presentation.http.schemas.product import (
    ProductListResponse,
    ProductResponse,
)

__all__ = [
    "ErrorResponse",
    "ProductListResponse",
    "ProductResponse",
    "ValidationErrorDetail",
]
