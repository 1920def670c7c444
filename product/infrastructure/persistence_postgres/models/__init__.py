"""SQLAlchemy ORM Models."""

from product.infrastructure.persistence_postgres.models.product import ProductModel

__all__ = ["ProductModel"]
