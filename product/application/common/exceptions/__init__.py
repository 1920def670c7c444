"""Application Exceptions."""

from product.application.common.exceptions.base import ApplicationError
from product.application.common.exceptions.validation import (
    InvalidIdFormatError,
    InvalidRequestError,
)

__all__ = [
    "ApplicationError",
    "InvalidIdFormatError",
    "InvalidRequestError",
]
