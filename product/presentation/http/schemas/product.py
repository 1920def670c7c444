"""Product HTTP Schemas."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer

# 금액/평점은 JSON에서 숫자로 내보냄 (기본 Decimal 직렬화는 문자열)
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductResponse(BaseModel):
    """비교용 상품 응답.

    요청하지 않은 필드는 None으로 남고 직렬화 시 제외됩니다.
    """

    id: int | None = Field(None, description="상품 ID", examples=[1])
    name: str | None = Field(None, description="상품명", examples=["Smartphone Alpha X1"])
    description: str | None = Field(None, description="상품 설명")
    price: JsonDecimal | None = Field(None, description="가격", examples=["449.99"])
    size: str | None = Field(None, description="크기", examples=['6.2"'])
    weight: str | None = Field(None, description="무게", examples=["180g"])
    color: str | None = Field(None, description="색상", examples=["Black"])
    image_url: str | None = Field(None, description="이미지 URL", alias="imageUrl")
    rating: JsonDecimal | None = Field(None, description="평점", examples=["4.5"])
    product_type: str | None = Field(
        None,
        description="상품 유형 (GENERIC, SMARTPHONE 등)",
        alias="productType",
    )
    specifications: dict[str, Any] | None = Field(None, description="유형별 가변 스펙")

    model_config = {"populate_by_name": True}


class ProductListResponse(BaseModel):
    """상품 비교 응답."""

    products: list[ProductResponse] = Field(..., description="비교 대상 상품 목록")
