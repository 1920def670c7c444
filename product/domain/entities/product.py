"""Product Entity.

비교 조회 대상 상품 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from product.domain.enums import ProductType


@dataclass
class Product:
    """상품 엔티티.

    저장소에서만 생성/수정되며, 비교 조회는 읽기만 합니다.

    Attributes:
        id: 상품 고유 ID (저장소 할당)
        name: 상품명
        price: 가격 (고정 소수점)
        description: 상품 설명
        size: 크기
        weight: 무게
        color: 색상
        image_url: 이미지 URL
        rating: 평점 (고정 소수점)
        product_type: 상품 유형 (기본 GENERIC)
        specifications: 유형별 가변 스펙
    """

    id: int
    name: str
    price: Decimal
    description: str | None = None
    size: str | None = None
    weight: str | None = None
    color: str | None = None
    image_url: str | None = None
    rating: Decimal | None = None
    product_type: ProductType = ProductType.GENERIC
    specifications: dict[str, Any] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return False
        return self.id == other.id
