"""Product Comparison HTTP Controller."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from product.application.comparison import CompareProductsQuery
from product.presentation.http.mappers import parse_fields, parse_ids, to_product_response
from product.presentation.http.schemas import ErrorResponse, ProductListResponse
from product.setup.dependencies import get_compare_products_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["product comparison"])


@router.get(
    "/compare",
    response_model=ProductListResponse,
    response_model_exclude_none=True,
    summary="상품 비교 조회",
    description=(
        "여러 상품의 상세 정보를 요청한 순서대로 반환합니다. "
        "**ids**는 필수(콤마 구분), **fields**로 응답 속성을 제한할 수 있습니다."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "ids 누락 또는 숫자가 아닌 ID"},
        404: {"model": ErrorResponse, "description": "존재하지 않는 상품 ID 포함"},
        422: {"model": ErrorResponse, "description": "ids가 비어 있음"},
        500: {"model": ErrorResponse, "description": "내부 서버 오류"},
    },
)
async def compare_products(
    query: Annotated[CompareProductsQuery, Depends(get_compare_products_query)],
    ids: Annotated[
        str,
        Query(min_length=1, description="비교할 상품 ID (콤마 구분)", examples=["1,2,3"]),
    ],
    fields: Annotated[
        str | None,
        Query(
            description=(
                "응답에 포함할 필드 (선택). id, name, description, price, size, weight, "
                "color, imageUrl, rating, productType, specifications"
            ),
            examples=["name,price,rating,specifications"],
        ),
    ] = None,
) -> ProductListResponse:
    """상품 비교 목록을 조회합니다."""
    id_list = parse_ids(ids)
    field_set = parse_fields(fields)
    logger.debug("Parsed comparison request", extra={"ids": id_list, "fields": fields})

    products = await query.execute(id_list, field_set)

    return ProductListResponse(
        products=[to_product_response(p, field_set) for p in products],
    )
