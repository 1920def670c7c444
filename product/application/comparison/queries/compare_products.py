"""CompareProductsQuery.

상품 비교 조회 Query입니다.
캐시 우선 조회 후 miss만 저장소에서 일괄 로드합니다 (cache-aside).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from product.application.common.exceptions import InvalidRequestError
from product.application.comparison.dto import ProductField
from product.application.comparison.ports import ProductCache, ProductReader
from product.domain.entities import Product
from product.domain.exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


class CompareProductsQuery:
    """상품 비교 조회 Query.

    요청 순서를 보존하면서 중복 ID를 제거하고,
    캐시 miss인 ID만 저장소에서 한 번에 조회합니다.

    캐시가 없는 구성은 NullProductCache를 주입하여 같은 경로로 처리합니다.
    """

    def __init__(self, reader: ProductReader, cache: ProductCache) -> None:
        """Initialize.

        Args:
            reader: 상품 Reader (저장소)
            cache: 상품 캐시
        """
        self._reader = reader
        self._cache = cache

    async def execute(
        self,
        ids: Sequence[int] | None,
        fields: Iterable[ProductField] | None = None,
    ) -> list[Product]:
        """요청 순서대로 상품 목록을 조회합니다.

        fields는 표현 계층에서 적용되며, 여기서는 상품을 자르지 않습니다.

        Args:
            ids: 상품 ID 목록 (중복 허용, 비어 있으면 안 됨)
            fields: 응답에 포함할 필드 (없으면 전체)

        Returns:
            중복 제거된 ID의 최초 등장 순서대로 정렬된 상품 목록

        Raises:
            InvalidRequestError: ID 목록이 없거나 비어 있음
            ProductNotFoundError: 저장소에도 없는 ID가 있음
        """
        if not ids:
            raise InvalidRequestError()

        logger.info(
            "Getting comparison for products",
            extra={"ids": list(ids), "fields": sorted(f.value for f in fields or ())},
        )

        # 1. 중복 제거 (최초 등장 순서 유지)
        unique_ids = list(dict.fromkeys(ids))

        # 2. 캐시 조회
        id_to_product: dict[int, Product] = {}
        missed_ids: list[int] = []
        for product_id in unique_ids:
            cached = await self._cache.get(product_id)
            if cached is not None:
                id_to_product[product_id] = cached
            else:
                missed_ids.append(product_id)

        logger.debug(
            "Product cache probe finished",
            extra={"hits": len(id_to_product), "misses": len(missed_ids)},
        )

        # 3. miss만 저장소에서 일괄 조회
        if missed_ids:
            loaded = await self._reader.find_by_ids(missed_ids)
            self._ensure_all_found(missed_ids, loaded)

            for product in loaded:
                id_to_product[product.id] = product
                await self._put_cache(product)

        # 4. 요청 순서로 재조립
        return [id_to_product[product_id] for product_id in unique_ids]

    @staticmethod
    def _ensure_all_found(requested: Sequence[int], loaded: Sequence[Product]) -> None:
        """저장소 응답에서 빠진 ID가 있으면 전체를 모아 실패시킵니다."""
        found_ids = {product.id for product in loaded}
        missing_ids = [product_id for product_id in requested if product_id not in found_ids]
        if missing_ids:
            logger.warning(
                "Products not found for comparison",
                extra={"missing_ids": missing_ids},
            )
            raise ProductNotFoundError(missing_ids)

    async def _put_cache(self, product: Product) -> None:
        """캐시 저장 (best-effort).

        캐시 쓰기 실패는 요청 실패로 전파하지 않습니다.
        """
        try:
            await self._cache.put(product.id, product)
        except Exception as e:
            logger.warning(
                "Product cache write failed (graceful degradation)",
                extra={"product_id": product.id, "error": str(e)},
            )
