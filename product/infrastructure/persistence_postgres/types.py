"""Custom Column Types.

상품 유형별 가변 스펙(specifications)을 TEXT 컬럼에 JSON으로 저장합니다.
"""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class SpecificationsJSON(TypeDecorator):
    """specifications dict <-> JSON 문자열 변환 타입.

    - 저장: None 또는 빈 dict는 NULL
    - 조회: NULL, 빈 문자열, 공백 문자열은 빈 dict
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: dict[str, Any] | None, dialect) -> str | None:
        if not value:
            return None
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ValueError("Cannot serialize specifications to JSON") from e

    def process_result_value(self, value: str | None, dialect) -> dict[str, Any]:
        if value is None or not value.strip():
            return {}
        try:
            data = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"Cannot deserialize specifications from JSON: {value}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Cannot deserialize specifications from JSON: {value}")
        return data
