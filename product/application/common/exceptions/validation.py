"""검증 관련 예외."""

from product.application.common.exceptions.base import ApplicationError


class InvalidRequestError(ApplicationError):
    """요청 자체가 유효하지 않음 (예: 상품 ID 목록 누락)."""

    def __init__(self, message: str = "At least one product ID is required") -> None:
        super().__init__(message)


class InvalidIdFormatError(ApplicationError):
    """숫자로 해석할 수 없는 상품 ID."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid ID: {value}")
