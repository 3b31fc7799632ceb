# app/domains/company/services.py

"""
회사 도메인의 유스케이스(서비스) 계층입니다.
라우터와 저장소 사이에서 호출을 그대로 위임하며, 별도의 상태나 정책은 없습니다.
하위 계층의 예외는 어떤 작업에서 실패했는지 문맥을 덧붙여 ServiceError로 다시 던집니다.
"""

import uuid

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import ServiceError
from . import models, schemas
from .crud import CompanyRepository


class CompanyService:
    def __init__(self, company_repo: CompanyRepository):
        self.company_repo = company_repo

    async def create(self, db: AsyncSession, company_in: schemas.CompanyCreate) -> models.Company:
        try:
            return await self.company_repo.create(db, obj_in=company_in)
        except Exception as e:
            raise ServiceError(f"company_repo.create: {e}") from e

    async def get_by_id(self, db: AsyncSession, company_id: uuid.UUID) -> models.Company:
        try:
            return await self.company_repo.get(db, company_id)
        except Exception as e:
            raise ServiceError(f"company_repo.get: {e}") from e

    async def patch(
        self, db: AsyncSession, company_id: uuid.UUID, company_in: schemas.CompanyUpdate
    ) -> models.Company:
        try:
            return await self.company_repo.patch(db, id=company_id, obj_in=company_in)
        except Exception as e:
            raise ServiceError(f"company_repo.patch: {e}") from e

    async def delete(self, db: AsyncSession, company_id: uuid.UUID) -> None:
        try:
            await self.company_repo.delete(db, id=company_id)
        except Exception as e:
            raise ServiceError(f"company_repo.delete: {e}") from e
