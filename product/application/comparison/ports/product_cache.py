"""Product Cache Port.

상품 캐시 추상화 인터페이스.
Redis 등 다양한 캐시 저장소 어댑터 구현 가능.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from product.domain.entities import Product


class ProductCache(ABC):
    """상품 캐시 포트.

    키(상품 ID) 단위 get/put만 제공합니다.
    TTL, 만료, 직렬화는 어댑터가 결정합니다.
    """

    @abstractmethod
    async def get(self, product_id: int) -> Product | None:
        """캐시에서 상품 조회.

        Args:
            product_id: 상품 ID

        Returns:
            캐시된 상품, 없거나 만료되었으면 None
        """
        ...

    @abstractmethod
    async def put(self, product_id: int, product: Product) -> None:
        """캐시에 상품 저장.

        Args:
            product_id: 상품 ID (product.id와 동일해야 함)
            product: 저장할 상품
        """
        ...
