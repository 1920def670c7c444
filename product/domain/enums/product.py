"""Product Domain Enums."""

from enum import Enum


class ProductType(str, Enum):
    """상품 유형.

    SMARTPHONE 등 특화 유형은 specifications에 가변 스펙
    (배터리, 카메라, 메모리 등)을 가집니다.
    """

    GENERIC = "GENERIC"
    SMARTPHONE = "SMARTPHONE"

    @classmethod
    def from_value(cls, value: "str | ProductType | None") -> "ProductType":
        """저장소 값을 ProductType으로 변환합니다. 값이 없으면 GENERIC."""
        if value is None or value == "":
            return cls.GENERIC
        if isinstance(value, ProductType):
            return value
        return cls(value)
