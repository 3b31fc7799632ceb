# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- 설정 객체로부터 SQLModel의 비동기 엔진을 생성합니다.
- 비동기 세션 공장을 만들고, 요청마다 세션을 제공하는 의존성 함수를 제공합니다.

엔진과 세션 공장은 모듈 전역이 아니라 create_app()에서 만들어 app.state에 보관합니다.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import Settings

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 모델 모듈을 임포트합니다.
from app.domains.company import models  # noqa: F401

# SQLModel의 기본 MetaData 객체입니다.
metadata = SQLModel.metadata


def create_db_engine(settings: Settings) -> AsyncEngine:
    """설정의 DATABASE_URL로 커넥션 풀을 가진 비동기 엔진을 생성합니다."""
    return create_async_engine(
        settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
        echo=settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
        future=True,
        pool_recycle=3600,  # 1시간마다 연결 재활용
        pool_size=10,
        max_overflow=20
    )


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    """주어진 엔진에 묶인 비동기 '세션 공장'을 정의합니다."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with request.app.state.session_factory() as session:
        yield session
