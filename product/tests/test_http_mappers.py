"""요청 파싱 및 필드 투영 테스트."""

import pytest

from product.application.common.exceptions import InvalidIdFormatError
from product.application.comparison.dto import ProductField
from product.domain.entities import Product
from product.presentation.http.mappers import parse_fields, parse_ids, to_product_response


class TestParseIds:
    """ids 파라미터 파싱."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_is_empty_list(self, raw) -> None:
        assert parse_ids(raw) == []

    def test_trims_and_keeps_order_and_duplicates(self) -> None:
        assert parse_ids(" 3, 1 ,3,2") == [3, 1, 3, 2]

    def test_only_commas_is_empty_list(self) -> None:
        assert parse_ids(",, ,") == []

    def test_non_numeric_token_rejected(self) -> None:
        with pytest.raises(InvalidIdFormatError) as exc_info:
            parse_ids("1,abc,2")

        assert exc_info.value.value == "abc"
        assert exc_info.value.message == "Invalid ID: abc"

    def test_signed_ids_accepted(self) -> None:
        assert parse_ids("+7,-3,0") == [7, -3, 0]

    def test_bigint_bounds_accepted(self) -> None:
        assert parse_ids("9223372036854775807,-9223372036854775808") == [
            2**63 - 1,
            -(2**63),
        ]

    @pytest.mark.parametrize(
        "token",
        [
            "1_000",
            "١٢",  # 아랍 숫자
            "１２",  # 전각 숫자
            "9223372036854775808",
            "-9223372036854775809",
            "99999999999999999999",
            "1.5",
            "0x10",
            "+",
            "1 2",
        ],
    )
    def test_non_bigint_token_rejected(self, token: str) -> None:
        with pytest.raises(InvalidIdFormatError) as exc_info:
            parse_ids(f"1,{token}")

        assert exc_info.value.value == token


class TestParseFields:
    """fields 파라미터 파싱."""

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_blank_means_all_fields(self, raw) -> None:
        assert parse_fields(raw) is None

    def test_case_insensitive_tokens(self) -> None:
        assert parse_fields("NAME, imageurl,productType") == {
            ProductField.NAME,
            ProductField.IMAGE_URL,
            ProductField.PRODUCT_TYPE,
        }

    def test_unknown_tokens_ignored(self) -> None:
        assert parse_fields("price,foo") == {ProductField.PRICE}

    def test_only_unknown_tokens_means_all_fields(self) -> None:
        assert parse_fields("foo,bar") is None


class TestToProductResponse:
    """필드 투영."""

    def test_no_filter_includes_everything(self, alpha: Product) -> None:
        response = to_product_response(alpha)

        assert response.id == 1
        assert response.name == alpha.name
        assert response.image_url == alpha.image_url
        assert response.product_type == "SMARTPHONE"
        assert response.specifications == alpha.specifications

    def test_empty_filter_includes_everything(self, alpha: Product) -> None:
        assert to_product_response(alpha, set()) == to_product_response(alpha, None)

    def test_only_requested_fields(self, alpha: Product) -> None:
        response = to_product_response(alpha, {ProductField.NAME, ProductField.PRICE})

        dumped = response.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"name": "Smartphone Alpha X1", "price": alpha.price}

    def test_empty_specifications_omitted(self, headphones: Product) -> None:
        response = to_product_response(headphones)

        assert response.specifications is None
        assert response.product_type == "GENERIC"

    def test_projection_copies_specifications(self, alpha: Product) -> None:
        response = to_product_response(alpha, {ProductField.SPECIFICATIONS})
        response.specifications["brand"] = "Changed"

        assert alpha.specifications["brand"] == "Alpha"
