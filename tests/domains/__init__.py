# tests/domains/__init__.py

"""
도메인별 테스트 스위트 패키지입니다.

- `test_company_n.py`: 실제 DB를 사용하는 'company' API 통합 테스트.
- `test_company_crud.py`: 저장소(CRUDCompany) 테스트.
- `test_company_events.py`: 이벤트 전송 데코레이터, 전송기, ARQ 태스크 테스트.
- `test_company_routers.py`: 서비스를 대체한 라우터(검증/인증/오류 매핑) 테스트.
"""

__title__ = "Company Domain Tests"
__description__ = "Tests for the company domain."
__version__ = "0.1.0"
__all__ = []
