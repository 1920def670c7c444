"""Product Reader Port."""

from abc import ABC, abstractmethod
from typing import Sequence

from product.domain.entities import Product


class ProductReader(ABC):
    """상품 일괄 조회 포트.

    인프라스트럭처 계층에서 구현됩니다.
    """

    @abstractmethod
    async def find_by_ids(self, ids: Sequence[int]) -> Sequence[Product]:
        """ID 목록에 해당하는 상품을 한 번에 조회합니다.

        존재하지 않는 ID는 오류 없이 결과에서 빠집니다.
        요청하지 않은 상품은 반환하지 않으며, 반환 순서는 보장하지 않습니다.

        Args:
            ids: 조회할 상품 ID 목록

        Returns:
            조회된 상품 목록
        """
        ...
