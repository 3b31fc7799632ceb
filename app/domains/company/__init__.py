# app/domains/company/__init__.py

"""
FastAPI 애플리케이션의 'company' 도메인 패키지입니다.

회사(company) 리소스 하나에 대한 생성/조회/부분 수정/삭제를 담당하며,
변경 작업마다 선택적으로 변경 이벤트를 내보냅니다.

주요 서브모듈:
- `models.py`: company 테이블에 매핑되는 SQLModel 정의와 CompanyType Enum.
- `schemas.py`: 요청 및 응답 유효성 검사용 Pydantic 모델 (부분 수정 명령 포함).
- `crud.py`: 저장소(CRUDCompany)와 이벤트 전송 데코레이터(EventSendingCompanyRepository).
- `events.py`: 변경 이벤트 모델과 이벤트 전송기 구현 (noop, arq).
- `services.py`: 라우터와 저장소 사이의 유스케이스 계층.
- `routers.py`: FastAPI API 엔드포인트 정의.
- `tasks.py`: arq 워커가 실행하는 변경 이벤트 소비 태스크.
"""

__title__ = "Company Domain"
__description__ = "Manages company records and emits change events on mutation."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "crud", "events", "services", "routers", "tasks"]
