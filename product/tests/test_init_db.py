"""products 스키마 / 샘플 데이터 적재 테스트.

SQLite(aiosqlite) 메모리 DB에 Base.metadata를 만들고 init_db 시드를 실행합니다.
"""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from product.domain.enums import ProductType
from product.infrastructure.persistence_postgres.base import Base
from product.infrastructure.persistence_postgres.mappers import product_model_to_entity
from product.infrastructure.persistence_postgres.models import ProductModel
from product.jobs.init_db import SAMPLE_PRODUCTS, seed_products

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def engine() -> AsyncEngine:
    """스키마가 생성된 메모리 DB 엔진."""
    test_engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


async def _load_all(engine: AsyncEngine) -> list[ProductModel]:
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        result = await session.execute(select(ProductModel).order_by(ProductModel.id))
        return list(result.scalars().all())


class TestSchema:
    async def test_specifications_column_is_nullable(self) -> None:
        assert ProductModel.__table__.c.specifications.nullable is True

    async def test_product_without_specifications_can_be_stored(
        self,
        engine: AsyncEngine,
    ) -> None:
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        async with session_factory() as session:
            session.add(ProductModel(name="Mug", price=Decimal("9.90"), specifications={}))
            await session.commit()

        async with engine.connect() as conn:
            stored = await conn.scalar(text("SELECT specifications FROM products"))
        assert stored is None

        [model] = await _load_all(engine)
        product = product_model_to_entity(model)
        assert product.specifications == {}
        assert product.product_type is ProductType.GENERIC


class TestSeedProducts:
    async def test_seeds_sample_catalog(self, engine: AsyncEngine) -> None:
        added = await seed_products(engine)

        assert added == len(SAMPLE_PRODUCTS)
        products = [product_model_to_entity(m) for m in await _load_all(engine)]
        assert [p.name for p in products] == [d["name"] for d in SAMPLE_PRODUCTS]

        alpha, _, headphones = products
        assert alpha.product_type is ProductType.SMARTPHONE
        assert alpha.specifications["batteryCapacityMah"] == 5000
        assert alpha.price == Decimal("449.99")
        assert headphones.product_type is ProductType.GENERIC
        assert headphones.specifications == {}

    async def test_seed_skipped_when_table_has_rows(self, engine: AsyncEngine) -> None:
        await seed_products(engine)

        added = await seed_products(engine)

        assert added == 0
        assert len(await _load_all(engine)) == len(SAMPLE_PRODUCTS)
