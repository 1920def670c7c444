"""SQLAlchemy Product Reader Implementation."""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product.application.comparison.ports import ProductReader
from product.domain.entities import Product
from product.infrastructure.persistence_postgres.mappers import product_model_to_entity
from product.infrastructure.persistence_postgres.models import ProductModel


class SqlaProductReader(ProductReader):
    """SQLAlchemy 기반 상품 Reader.

    ProductReader 포트를 구현합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션 (읽기 전용)
        """
        self._session = session

    async def find_by_ids(self, ids: Sequence[int]) -> Sequence[Product]:
        """ID 목록으로 상품을 일괄 조회합니다 (IN 쿼리 1회)."""
        if not ids:
            return []

        stmt = select(ProductModel).where(ProductModel.id.in_(list(ids)))
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [product_model_to_entity(m) for m in models]
