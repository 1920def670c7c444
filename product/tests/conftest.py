"""Pytest configuration for product tests.

공통 픽스처: 샘플 상품, Reader mock, 인메모리 캐시.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from product.application.comparison.ports import ProductCache
from product.domain.entities import Product
from product.domain.enums import ProductType


class InMemoryProductCache(ProductCache):
    """dict 기반 테스트용 캐시.

    get/put 호출 기록을 남겨 캐시 동작을 검증합니다.
    """

    def __init__(self, initial: dict[int, Product] | None = None) -> None:
        self.store: dict[int, Product] = dict(initial or {})
        self.get_calls: list[int] = []
        self.put_calls: list[int] = []

    async def get(self, product_id: int) -> Product | None:
        self.get_calls.append(product_id)
        return self.store.get(product_id)

    async def put(self, product_id: int, product: Product) -> None:
        self.put_calls.append(product_id)
        self.store[product_id] = product


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def alpha() -> Product:
    """스마트폰 상품."""
    return Product(
        id=1,
        name="Smartphone Alpha X1",
        description="Smartphone with AMOLED display and 108MP camera.",
        price=Decimal("449.99"),
        size='6.2"',
        weight="180g",
        color="Black",
        image_url="https://example.com/img/alpha-x1.png",
        rating=Decimal("4.5"),
        product_type=ProductType.SMARTPHONE,
        specifications={
            "batteryCapacityMah": 5000,
            "memoryGb": 8,
            "brand": "Alpha",
        },
    )


@pytest.fixture
def beta() -> Product:
    """두 번째 스마트폰 상품."""
    return Product(
        id=2,
        name="Smartphone Beta Pro",
        description="Flagship smartphone with 120Hz display.",
        price=Decimal("599.99"),
        size='6.7"',
        weight="205g",
        color="Silver",
        rating=Decimal("4.7"),
        product_type=ProductType.SMARTPHONE,
        specifications={"batteryCapacityMah": 4800, "brand": "Beta"},
    )


@pytest.fixture
def headphones() -> Product:
    """일반 상품 (specifications 없음)."""
    return Product(
        id=3,
        name="Wireless Headphones",
        price=Decimal("129.90"),
        color="White",
    )


@pytest.fixture
def catalog(alpha: Product, beta: Product, headphones: Product) -> dict[int, Product]:
    """저장소에 있는 상품 전체."""
    return {p.id: p for p in (alpha, beta, headphones)}


@pytest.fixture
def mock_reader(catalog: dict[int, Product]) -> AsyncMock:
    """ProductReader mock.

    요청한 ID 중 catalog에 있는 것만 역순으로 반환합니다 (순서 비보장 재현).
    """
    reader = AsyncMock()

    async def find_by_ids(ids):
        return [catalog[i] for i in reversed(list(ids)) if i in catalog]

    reader.find_by_ids = AsyncMock(side_effect=find_by_ids)
    return reader


@pytest.fixture
def empty_cache() -> InMemoryProductCache:
    """비어 있는 캐시."""
    return InMemoryProductCache()


@pytest.fixture
def cache_factory():
    """초기 내용을 지정해 InMemoryProductCache를 만드는 팩토리."""
    return InMemoryProductCache
