"""Domain Entities."""

from product.domain.entities.product import Product

__all__ = ["Product"]
