"""도메인 예외."""

from product.domain.exceptions.base import DomainError
from product.domain.exceptions.product import ProductNotFoundError

__all__ = [
    "DomainError",
    "ProductNotFoundError",
]
