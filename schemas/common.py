"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 필드명 변환 베이스: CamelModel (UI camelCase ⟷ DB snake_case)
  2) 에러 응답 표준: ErrorDetail, ErrorResponse
  3) 성공 응답 래퍼: envelope()
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


# =========================================================
# 1) 필드명 변환 베이스
# =========================================================

class CamelModel(BaseModel):
    """
    - 입력: firstName / first_name 둘 다 허용
    - 출력: model_dump(by_alias=True) 시 camelCase
    - ORM 객체에서 바로 검증 가능 (from_attributes)
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,   # DB에는 enum 값(문자열) 그대로 저장
    )

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


# =========================================================
# 2) 에러 응답 표준
# =========================================================

class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: NOT_FOUND, INTERNAL_ERROR)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")
    missing_ids: Optional[List[int]] = Field(default=None, description="참조 무결성 오류 시 존재하지 않는 id 목록")

class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py에서 이 스키마로 리턴
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )
    latency_ms: Optional[int] = Field(
        default=None, ge=0, description="요청 처리에 걸린 시간(ms). 타이밍 미들웨어와 연동 시 사용"
    )

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 3) 성공 응답 래퍼
# =========================================================

def envelope(data: Any, message: Optional[str] = None, success: bool = True) -> dict:
    """라우터 공통 응답 포맷: {"success", "data", "message"}"""
    body = {"success": success, "data": data}
    if message is not None:
        body["message"] = message
    return body
