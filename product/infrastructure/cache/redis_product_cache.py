"""Redis Product Cache Implementation.

데이터 구조:
- {prefix}product::{product_id} → String (상품 JSON, TTL 적용)
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from redis.asyncio import Redis

from product.application.comparison.ports import ProductCache
from product.domain.entities import Product
from product.domain.enums import ProductType

logger = logging.getLogger(__name__)

CACHE_NAME = "product"
DEFAULT_KEY_PREFIX = "products_"
DEFAULT_TTL = 3600  # 1시간


class RedisProductCache(ProductCache):
    """Redis 상품 캐시.

    상품 하나를 키 하나에 저장합니다. null 값은 저장하지 않습니다.
    """

    def __init__(
        self,
        redis: Redis,
        ttl: int = DEFAULT_TTL,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        """초기화.

        Args:
            redis: Redis 클라이언트
            ttl: 캐시 TTL (초)
            key_prefix: 키 프리픽스
        """
        self._redis = redis
        self._ttl = ttl
        self._key_prefix = key_prefix

    def _key(self, product_id: int) -> str:
        """상품 키 생성."""
        return f"{self._key_prefix}{CACHE_NAME}::{product_id}"

    async def get(self, product_id: int) -> Product | None:
        """캐시에서 상품 조회."""
        cached = await self._redis.get(self._key(product_id))
        if not cached:
            return None

        try:
            product = self._deserialize(cached)
        except (ValueError, KeyError, TypeError, InvalidOperation) as e:
            # 스키마가 바뀐 캐시 값은 miss로 처리 (다음 put에서 덮어씀)
            logger.warning(
                "Corrupted product cache entry, treating as miss",
                extra={"product_id": product_id, "error": str(e)},
            )
            return None

        # 키의 ID와 값의 ID는 항상 같아야 함
        if product.id != product_id:
            logger.warning(
                "Product cache entry id mismatch, treating as miss",
                extra={"product_id": product_id, "cached_id": product.id},
            )
            return None
        return product

    async def put(self, product_id: int, product: Product) -> None:
        """캐시에 상품 저장 (SETEX)."""
        if product is None:
            return
        await self._redis.setex(
            self._key(product_id),
            self._ttl,
            self._serialize(product),
        )

    def _serialize(self, product: Product) -> str:
        """상품을 JSON으로 직렬화합니다."""
        data = {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price) if product.price is not None else None,
            "size": product.size,
            "weight": product.weight,
            "color": product.color,
            "image_url": product.image_url,
            "rating": str(product.rating) if product.rating is not None else None,
            "product_type": product.product_type.value,
            "specifications": product.specifications,
        }
        return json.dumps(data, ensure_ascii=False)

    def _deserialize(self, data: str | bytes) -> Product:
        """JSON을 상품으로 역직렬화합니다."""
        if isinstance(data, bytes):
            data = data.decode("utf-8")

        item: dict[str, Any] = json.loads(data)
        return Product(
            id=int(item["id"]),
            name=item["name"],
            description=item.get("description"),
            price=Decimal(item["price"]),
            size=item.get("size"),
            weight=item.get("weight"),
            color=item.get("color"),
            image_url=item.get("image_url"),
            rating=Decimal(item["rating"]) if item.get("rating") is not None else None,
            product_type=ProductType.from_value(item.get("product_type")),
            specifications=item.get("specifications") or {},
        )
