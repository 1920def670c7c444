"""Dependency Injection for FastAPI.

Architecture:
    - 캐시 구성 여부는 생성 시점에 결정 (Redis 또는 NullProductCache)
    - 저장소 조회만 읽기 전용 세션 경계 안에서 실행
"""

from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from product.application.comparison import CompareProductsQuery
from product.application.comparison.ports import ProductCache, ProductReader
from product.infrastructure.cache import NullProductCache, RedisProductCache
from product.infrastructure.persistence_postgres import SqlaProductReader
from product.setup.config import get_settings
from product.setup.database import get_readonly_session, get_redis


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """읽기 전용 DB 세션을 주입합니다."""
    async with get_readonly_session() as session:
        yield session


async def get_product_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ProductReader:
    """Product Reader를 주입합니다."""
    return SqlaProductReader(session)


async def get_product_cache() -> ProductCache:
    """Product Cache를 주입합니다.

    cache_enabled=False면 항상 miss인 NullProductCache를 사용합니다.
    """
    settings = get_settings()
    if not settings.cache_enabled:
        return NullProductCache()

    redis = await get_redis()
    return RedisProductCache(
        redis,
        ttl=settings.cache_ttl_seconds,
        key_prefix=settings.cache_key_prefix,
    )


async def get_compare_products_query(
    reader: Annotated[ProductReader, Depends(get_product_reader)],
    cache: Annotated[ProductCache, Depends(get_product_cache)],
) -> CompareProductsQuery:
    """CompareProductsQuery를 주입합니다."""
    return CompareProductsQuery(reader, cache)
