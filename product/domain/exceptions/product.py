"""Product 도메인 예외."""

from collections.abc import Iterable

from product.domain.exceptions.base import DomainError


class ProductNotFoundError(DomainError):
    """요청한 상품 중 일부를 찾을 수 없음.

    누락된 ID 전체를 보관합니다 (첫 번째 하나만이 아님).
    """

    def __init__(self, missing_ids: Iterable[int]) -> None:
        self.missing_ids = list(missing_ids)
        super().__init__(f"Product(s) not found: {self.missing_ids}")
