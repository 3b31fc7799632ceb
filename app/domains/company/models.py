# app/domains/company/models.py

import uuid
from enum import Enum
from typing import Optional

from sqlalchemy import BigInteger, Column, Enum as SAEnum
from sqlmodel import Field, SQLModel


class CompanyType(str, Enum):
    """
    회사 유형을 정의하는 문자열 Enum 클래스입니다.
    DB와 API 모두 Enum의 값(value) 문자열을 그대로 사용합니다.
    """
    CORPORATIONS = "Corporations"
    NON_PROFIT = "NonProfit"
    COOPERATIVE = "Cooperative"
    SOLE_PROPRIETORSHIP = "Sole Proprietorship"


class Company(SQLModel, table=True):
    """
    company 테이블 모델을 정의하는 클래스입니다.
    id는 한 번 할당되면 변경되지 않으며, 유일성은 기본키 제약으로 보장합니다.
    """
    __tablename__ = "company"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="회사 고유 ID")
    name: str = Field(nullable=False, description="회사명")
    description: Optional[str] = Field(default=None, description="회사 설명")
    amount_of_employees: int = Field(
        sa_column=Column(BigInteger, nullable=False), description="직원 수 (0 이상)"
    )
    registered: bool = Field(default=False, nullable=False, description="등록 여부")
    type: CompanyType = Field(
        sa_column=Column(
            "type",
            SAEnum(
                CompanyType,
                name="company_type",
                native_enum=False,
                length=32,
                values_callable=lambda enum_cls: [member.value for member in enum_cls],
            ),
            nullable=False,
        ),
        description="회사 유형",
    )
