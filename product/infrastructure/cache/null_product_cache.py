"""Null Product Cache.

캐시가 구성되지 않은 환경용 no-op 어댑터입니다.
항상 miss를 반환하므로 모든 ID가 저장소에서 조회됩니다.
"""

from __future__ import annotations

from product.application.comparison.ports import ProductCache
from product.domain.entities import Product


class NullProductCache(ProductCache):
    """아무것도 저장하지 않는 캐시."""

    async def get(self, product_id: int) -> Product | None:
        return None

    async def put(self, product_id: int, product: Product) -> None:
        return None
