"""Product Cache Infrastructure.

Redis 캐시 어댑터와 캐시 비활성 구성용 Null 어댑터를 제공합니다.
"""

from product.infrastructure.cache.null_product_cache import NullProductCache
from product.infrastructure.cache.redis_product_cache import RedisProductCache

__all__ = ["NullProductCache", "RedisProductCache"]
