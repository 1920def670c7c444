"""Domain Enums."""

from product.domain.enums.product import ProductType

__all__ = ["ProductType"]
