"""Request Parsing & Field Projection.

쿼리 문자열을 도메인 입력으로 변환하고,
Product를 요청 필드만 채운 응답으로 투영합니다.
"""

from __future__ import annotations

import re
from collections.abc import Collection

from product.application.common.exceptions import InvalidIdFormatError
from product.application.comparison.dto import ProductField
from product.domain.entities import Product
from product.presentation.http.schemas import ProductResponse

MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_ids(raw: str | None) -> list[int]:
    """콤마로 구분된 ID 문자열을 파싱합니다.

    빈 토큰은 건너뛰고, 숫자가 아닌 토큰은 InvalidIdFormatError.
    """
    if raw is None or not raw.strip():
        return []

    ids: list[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        ids.append(_parse_id(token))
    return ids


def _parse_id(token: str) -> int:
    """부호 있는 64비트 ASCII 정수만 허용합니다 (BIGINT 컬럼 범위)."""
    if not _ID_PATTERN.fullmatch(token):
        raise InvalidIdFormatError(token)
    value = int(token)
    if not MIN_ID <= value <= MAX_ID:
        raise InvalidIdFormatError(token)
    return value


def parse_fields(raw: str | None) -> set[ProductField] | None:
    """콤마로 구분된 필드 토큰을 파싱합니다.

    알 수 없는 토큰은 무시하며, 남는 필드가 없으면 None (전체 필드).
    """
    if raw is None or not raw.strip():
        return None

    fields = {
        field
        for field in (ProductField.from_token(token) for token in raw.split(","))
        if field is not None
    }
    return fields or None


def to_product_response(
    product: Product,
    fields: Collection[ProductField] | None = None,
) -> ProductResponse:
    """Product를 요청 필드만 포함한 응답으로 변환합니다."""
    include_all = not fields

    def wants(field: ProductField) -> bool:
        return include_all or field in fields

    specifications = None
    if wants(ProductField.SPECIFICATIONS) and product.specifications:
        specifications = dict(product.specifications)

    return ProductResponse(
        id=product.id if wants(ProductField.ID) else None,
        name=product.name if wants(ProductField.NAME) else None,
        description=product.description if wants(ProductField.DESCRIPTION) else None,
        price=product.price if wants(ProductField.PRICE) else None,
        size=product.size if wants(ProductField.SIZE) else None,
        weight=product.weight if wants(ProductField.WEIGHT) else None,
        color=product.color if wants(ProductField.COLOR) else None,
        image_url=product.image_url if wants(ProductField.IMAGE_URL) else None,
        rating=product.rating if wants(ProductField.RATING) else None,
        product_type=(
            product.product_type.name
            if wants(ProductField.PRODUCT_TYPE) and product.product_type is not None
            else None
        ),
        specifications=specifications,
    )
