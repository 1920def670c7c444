"""Error HTTP Schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ValidationErrorDetail(BaseModel):
    """필드 단위 검증 오류."""

    field: str = Field(..., description="오류가 난 필드", examples=["ids"])
    rejected_value: Any = Field(None, description="거부된 값", alias="rejectedValue")
    message: str = Field(..., description="오류 메시지")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """표준 오류 응답."""

    timestamp: datetime = Field(..., description="오류 발생 시각")
    status: int = Field(..., description="HTTP 상태 코드", examples=[404])
    error: str = Field(..., description="오류 분류", examples=["NOT_FOUND"])
    message: str = Field(..., description="오류 요약")
    details: str | None = Field(None, description="오류 상세")
    path: str = Field(..., description="요청 경로")
    validation_errors: list[ValidationErrorDetail] | None = Field(
        None,
        description="검증 오류 목록",
        alias="validationErrors",
    )

    model_config = {"populate_by_name": True}
