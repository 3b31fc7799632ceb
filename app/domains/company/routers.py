# app/domains/company/routers.py

"""
'company' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

요청 파싱/검증은 스키마가, 오류 응답 매핑은 app.core.exceptions의 핸들러가 담당합니다.
- 검증 실패: 422, 하위 계층 오류: 500
- 생성/수정/삭제는 Bearer 토큰이 필요하며, 조회는 인증 없이 허용합니다.
"""

import uuid

from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import ErrorResponse
from app.core.security import require_bearer_token
from . import schemas
from .services import CompanyService


router = APIRouter(
    prefix="/companies",
    tags=["Company Management (회사 관리)"],
    responses={
        422: {"model": ErrorResponse, "description": "Invalid request parameters"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)


def get_company_service(request: Request) -> CompanyService:
    """create_app()에서 구성한 서비스(이벤트 데코레이터 적용 여부 포함)를 반환합니다."""
    return request.app.state.company_service


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    dependencies=[Depends(require_bearer_token)],
    summary="회사 생성",
)
async def create_company(
    company_in: schemas.CompanyCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    service: CompanyService = Depends(get_company_service),
):
    """
    새 회사를 생성합니다. 본문 없이 201을 반환합니다.
    - id를 생략하면 서버에서 발급합니다.
    """
    await service.create(db, company_in)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/{company_id}", response_model=schemas.CompanyRead, summary="회사 조회")
async def read_company(
    company_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    service: CompanyService = Depends(get_company_service),
):
    """
    ID로 회사를 조회합니다. 존재하지 않는 ID도 내부 오류(500)로 응답합니다.
    """
    return await service.get_by_id(db, company_id)


@router.patch(
    "/{company_id}",
    response_model=schemas.CompanyRead,
    dependencies=[Depends(require_bearer_token)],
    summary="회사 정보 수정",
)
async def patch_company(
    company_id: uuid.UUID,
    company_in: schemas.CompanyUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    service: CompanyService = Depends(get_company_service),
):
    """
    회사 정보를 수정합니다 (부분 업데이트 지원). 수정 후 전체 정보를 반환합니다.
    """
    return await service.patch(db, company_id, company_in)


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_bearer_token)],
    summary="회사 삭제",
)
async def delete_company(
    company_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    service: CompanyService = Depends(get_company_service),
):
    await service.delete(db, company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
