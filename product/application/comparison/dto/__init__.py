"""Comparison DTOs."""

from product.application.comparison.dto.comparison import ProductField

__all__ = ["ProductField"]
