# tests/__init__.py

"""
Company API 애플리케이션의 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트용 설정, 데이터베이스 엔진/세션, 애플리케이션, 인증된 클라이언트 픽스처.
- `test_main.py`: 루트/헬스 체크 엔드포인트와 애플리케이션 구성 테스트.
- `domains/`: 도메인별 테스트 모듈.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Company API Tests"
__description__ = "Test suite for the Company API FastAPI application."
__version__ = "0.1.0"
__all__ = []
