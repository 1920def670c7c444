"""Product Comparison Application."""

from product.application.comparison.queries import CompareProductsQuery

__all__ = ["CompareProductsQuery"]
