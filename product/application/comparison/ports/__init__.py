"""Comparison Ports."""

from product.application.comparison.ports.product_cache import ProductCache
from product.application.comparison.ports.product_reader import ProductReader

__all__ = ["ProductCache", "ProductReader"]
