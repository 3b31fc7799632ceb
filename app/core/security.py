# app/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- JWT(JSON Web Token) 생성.
- Bearer 토큰 검증 의존성 (쓰기 엔드포인트 보호용).

사용자 테이블은 없습니다. 서명 키로 검증 가능한 토큰을 가진 요청이면 통과시킵니다.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from app.core.config import Settings
from app.core.dependencies import get_app_settings
from app.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# auto_error=False: 헤더 누락 시 FastAPI 기본 403 대신 아래에서 직접 400을 반환합니다.
bearer_scheme = HTTPBearer(auto_error=False)


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(
    data: Dict[str, Any], settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Access Token을 생성합니다.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """토큰의 서명과 만료 시간을 검증하고 클레임을 반환합니다. 실패 시 JWTError를 던집니다."""
    return jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])


async def require_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """
    Authorization: Bearer <token> 헤더를 검증하고 토큰 클레임을 반환합니다.
    - 헤더가 없거나 형식이 잘못된 경우: 400
    - 서명이 틀리거나 만료된 경우: 401
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(status.HTTP_400_BAD_REQUEST, "missing or malformed jwt")
    try:
        return decode_access_token(credentials.credentials, settings)
    except JWTError as e:
        logger.info("JWT 검증 실패: %s", e)
        raise AuthenticationError(status.HTTP_401_UNAUTHORIZED, "invalid or expired jwt")
