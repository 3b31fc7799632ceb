# app/domains/company/schemas.py

import uuid
from typing import Optional

from pydantic import field_validator
from sqlmodel import SQLModel, Field

from .models import CompanyType

# 직원 수는 32비트 부호 없는 정수 범위로 제한합니다.
MAX_EMPLOYEES = 2**32 - 1


def _reject_blank(v):
    # 공백만으로 이루어진 이름은 빈 이름과 같이 취급합니다.
    if v is not None and not v.strip():
        raise ValueError("name must not be blank")
    return v


class CompanyBase(SQLModel):
    """
    회사 정보의 기본 속성을 정의하는 Pydantic Base 스키마입니다.
    """
    name: str = Field(..., min_length=1, description="회사명")
    description: Optional[str] = Field(None, description="회사 설명")
    amount_of_employees: int = Field(..., ge=0, le=MAX_EMPLOYEES, description="직원 수")
    registered: bool = Field(False, description="등록 여부")
    type: CompanyType = Field(..., description="회사 유형")

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        return _reject_blank(v)


# --- API Schemas ---
class CompanyCreate(CompanyBase):
    """
    회사 생성 요청 스키마입니다. id를 생략하거나 nil UUID를 보내면 저장소에서 새로 발급합니다.
    """
    id: Optional[uuid.UUID] = Field(None, description="클라이언트 지정 ID (선택)")


class CompanyRead(CompanyBase):
    """회사 조회/수정 응답 스키마입니다. SQLModel 기본 설정으로 ORM 객체에서 바로 검증됩니다."""
    id: uuid.UUID


class CompanyUpdate(SQLModel):
    """
    회사 정보를 부분 업데이트하기 위한 Pydantic 모델입니다.
    요청에 포함된 필드만 model_dump(exclude_unset=True)에 나타나므로,
    생략된 필드와 명시적으로 보낸 값을 구분할 수 있습니다.
    id는 이 명령으로 변경할 수 없습니다.
    """
    name: Optional[str] = Field(None, min_length=1, description="회사명")
    description: Optional[str] = Field(None, description="회사 설명 (null이면 비움)")
    amount_of_employees: Optional[int] = Field(None, ge=0, le=MAX_EMPLOYEES, description="직원 수")
    registered: Optional[bool] = Field(None, description="등록 여부")
    type: Optional[CompanyType] = Field(None, description="회사 유형")

    @field_validator("name", "amount_of_employees", "registered", "type")
    @classmethod
    def reject_explicit_null(cls, v):
        # 필수 컬럼은 생략은 허용하지만 null로 덮어쓸 수는 없습니다.
        if v is None:
            raise ValueError("field may be omitted but not set to null")
        return v

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: Optional[str]) -> Optional[str]:
        return _reject_blank(v)
