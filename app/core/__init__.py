# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `logging.py`: 루트 로거 설정.
- `database.py`: 비동기 엔진, 세션 공장, 요청별 세션 (SQLModel 및 AsyncSQLAlchemy).
- `crud_base.py`: 공통 CRUD 기본 클래스.
- `exceptions.py`: 공용 예외와 HTTP 오류 응답 매핑.
- `security.py`: JWT 발급 및 Bearer 토큰 검증.
- `dependencies.py`: FastAPI 의존성 주입에서 사용하는 공통 의존성 함수들.
- `migrations.py`: 시작 시 Alembic 마이그레이션 적용.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Company API Core"
__description__ = "Core components for the Company API FastAPI application."
__version__ = "0.1.0"
__all__ = []
