"""Comparison DTOs."""

from enum import Enum


class ProductField(str, Enum):
    """비교 응답에서 요청 가능한 필드 토큰.

    클라이언트가 관심 있는 속성만 받아보도록 `fields` 파라미터에 사용합니다.
    """

    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    PRICE = "price"
    SIZE = "size"
    WEIGHT = "weight"
    COLOR = "color"
    IMAGE_URL = "imageUrl"
    RATING = "rating"
    PRODUCT_TYPE = "productType"
    SPECIFICATIONS = "specifications"

    @classmethod
    def from_token(cls, token: str | None) -> "ProductField | None":
        """토큰을 대소문자 구분 없이 매칭합니다.

        Args:
            token: 요청 토큰 (예: "imageUrl", "PRICE")

        Returns:
            매칭된 필드, 알 수 없는 토큰이면 None
        """
        if token is None:
            return None
        normalized = token.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None
