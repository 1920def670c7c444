"""Comparison Queries."""

from product.application.comparison.queries.compare_products import (
    CompareProductsQuery,
)

__all__ = ["CompareProductsQuery"]
