"""PostgreSQL Persistence."""

from product.infrastructure.persistence_postgres.product_reader_sqla import (
    SqlaProductReader,
)

__all__ = ["SqlaProductReader"]
