"""SqlaProductReader / ORM mapper 테스트."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from product.domain.enums import ProductType
from product.infrastructure.persistence_postgres import SqlaProductReader
from product.infrastructure.persistence_postgres.mappers import product_model_to_entity
from product.infrastructure.persistence_postgres.models import ProductModel


def _model(**overrides) -> ProductModel:
    data = {
        "id": 1,
        "name": "Smartphone Alpha X1",
        "description": "AMOLED",
        "price": Decimal("449.99"),
        "size": '6.2"',
        "weight": "180g",
        "color": "Black",
        "image_url": "https://example.com/img/alpha-x1.png",
        "rating": Decimal("4.50"),
        "product_type": "SMARTPHONE",
        "specifications": {"brand": "Alpha"},
    }
    data.update(overrides)
    return ProductModel(**data)


def _session_returning(models: list[ProductModel]) -> AsyncMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = models
    session = AsyncMock()
    session.execute = AsyncMock(return_value=result)
    return session


class TestMapper:
    """ProductModel → Product 변환."""

    def test_copies_all_columns(self) -> None:
        product = product_model_to_entity(_model())

        assert product.id == 1
        assert product.name == "Smartphone Alpha X1"
        assert product.price == Decimal("449.99")
        assert product.image_url == "https://example.com/img/alpha-x1.png"
        assert product.rating == Decimal("4.50")
        assert product.product_type is ProductType.SMARTPHONE
        assert product.specifications == {"brand": "Alpha"}

    def test_missing_type_defaults_to_generic(self) -> None:
        product = product_model_to_entity(_model(product_type=None))

        assert product.product_type is ProductType.GENERIC

    def test_missing_specifications_become_empty_map(self) -> None:
        product = product_model_to_entity(_model(specifications=None))

        assert product.specifications == {}

    def test_specifications_are_copied(self) -> None:
        model = _model()

        product = product_model_to_entity(model)
        product.specifications["brand"] = "Changed"

        assert model.specifications == {"brand": "Alpha"}


class TestSqlaProductReader:
    """일괄 조회 테스트."""

    @pytest.mark.asyncio
    async def test_single_in_query(self) -> None:
        session = _session_returning([_model(id=2), _model(id=1)])
        reader = SqlaProductReader(session)

        products = await reader.find_by_ids([1, 2, 9])

        assert sorted(p.id for p in products) == [1, 2]
        session.execute.assert_awaited_once()
        stmt = session.execute.call_args[0][0]
        compiled = str(stmt.compile(compile_kwargs={"literal_binds": True}))
        assert "FROM products" in compiled
        assert "IN (1, 2, 9)" in compiled

    @pytest.mark.asyncio
    async def test_empty_ids_skip_query(self) -> None:
        session = _session_returning([])
        reader = SqlaProductReader(session)

        assert await reader.find_by_ids([]) == []
        session.execute.assert_not_called()
