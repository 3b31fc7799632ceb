# app/core/config.py

import os
from typing import Literal, Tuple

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.

    전역 인스턴스를 두지 않습니다. get_settings()로 만든 객체를 create_app()에 넘기면
    app.state.settings에 보관되고, 의존성 함수들은 요청에서 이를 꺼내 씁니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable SQL echo and verbose logging")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    # --- HTTP 설정 ---
    LISTEN_HOST_PORT: str = Field("0.0.0.0:8080", description="Listen address in host:port form")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy connection URL (postgresql+asyncpg://...)")
    RUN_MIGRATIONS: bool = Field(True, description="Apply alembic migrations once at startup")

    # --- JWT (JSON Web Token) 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT token signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30, description="Access token expiration time in minutes")

    # --- 변경 이벤트 설정 ---
    EVENT_SENDER_ENABLED: bool = Field(False, description="Emit a change event after every mutation")
    EVENT_SENDER_BACKEND: Literal["noop", "arq"] = Field("noop", description="noop: log only, arq: enqueue on Redis")
    REDIS_HOST: str = Field("localhost", description="Redis host for the arq backend")
    REDIS_PORT: int = Field(6379, description="Redis port for the arq backend")

    @property
    def listen_address(self) -> Tuple[str, int]:
        """LISTEN_HOST_PORT를 (host, port)로 분리합니다. 호스트가 비어 있으면 0.0.0.0을 사용합니다."""
        host, _, port = self.LISTEN_HOST_PORT.rpartition(":")
        return host or "0.0.0.0", int(port)


def get_settings() -> Settings:
    """환경 변수와 .env에서 새 Settings 인스턴스를 만듭니다."""
    return Settings()
