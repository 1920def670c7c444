"""Product ORM Models.

String 타입 전략:
- VARCHAR(n): 표시용 속성 (name, size, weight, color, image_url)
- NUMERIC: 금액/평점 (부동소수점 오차 방지)
- TEXT: specifications JSON 문서
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import BigInteger, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from product.domain.enums import ProductType
from product.infrastructure.persistence_postgres.base import Base
from product.infrastructure.persistence_postgres.types import SpecificationsJSON


class ProductModel(Base):
    """상품 ORM 모델.

    products 테이블에 매핑됩니다.
    """

    __tablename__ = "products"

    # SQLite는 INTEGER PRIMARY KEY만 자동 증가
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(2000))
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    size: Mapped[str | None] = mapped_column(String(50))
    weight: Mapped[str | None] = mapped_column(String(50))
    color: Mapped[str | None] = mapped_column(String(50))
    image_url: Mapped[str | None] = mapped_column(String(500))
    rating: Mapped[Decimal | None] = mapped_column(Numeric(3, 2))
    # 유형 값 집합이 늘어날 수 있으므로 DB ENUM 대신 VARCHAR
    product_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=ProductType.GENERIC.value,
        server_default=ProductType.GENERIC.value,
    )
    # 빈 스펙은 NULL로 저장됨 (SpecificationsJSON)
    specifications: Mapped[dict[str, Any] | None] = mapped_column(
        SpecificationsJSON,
        nullable=True,
        default=dict,
    )
