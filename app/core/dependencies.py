# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 애플리케이션 설정 객체 획득 (get_app_settings).
- 데이터베이스 세션 관리 (get_db_session).
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import Settings
from app.core.database import get_session as get_main_app_session


def get_app_settings(request: Request) -> Settings:
    """create_app()에서 app.state에 보관한 설정 객체를 반환합니다."""
    return request.app.state.settings


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session(request):
        yield session
