# app/domains/company/crud.py

"""
'company' 테이블에 대한 저장소(repository) 구현을 정의하는 모듈입니다.

- CRUDCompany: 실제 DB에 INSERT/SELECT/UPDATE ... RETURNING/DELETE를 수행하는 기본 저장소.
- EventSendingCompanyRepository: 저장소를 감싸서 변경 작업이 성공할 때마다
  변경 이벤트를 전송하는 데코레이터. 동일한 인터페이스를 가지므로 어디서든 교체할 수 있습니다.
"""

import logging
import uuid
from typing import Protocol

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.exceptions import EventSendError
from . import models, schemas
from .events import CompanyEvent, CompanyEventSender, EventAction

logger = logging.getLogger(__name__)

NIL_UUID = uuid.UUID(int=0)


class CompanyRepository(Protocol):
    """회사 저장소 계약입니다. CRUDCompany와 EventSendingCompanyRepository가 구현합니다."""

    async def create(self, db: AsyncSession, *, obj_in: schemas.CompanyCreate) -> models.Company:
        ...

    async def get(self, db: AsyncSession, id: uuid.UUID) -> models.Company:
        ...

    async def patch(self, db: AsyncSession, *, id: uuid.UUID, obj_in: schemas.CompanyUpdate) -> models.Company:
        ...

    async def delete(self, db: AsyncSession, *, id: uuid.UUID) -> None:
        ...


class CRUDCompany(CRUDBase[models.Company, schemas.CompanyCreate, schemas.CompanyUpdate]):
    async def create(self, db: AsyncSession, *, obj_in: schemas.CompanyCreate) -> models.Company:
        """
        회사를 생성합니다. id가 없거나 nil UUID이면 새 UUID를 발급한 뒤 저장합니다.
        """
        if obj_in.id is None or obj_in.id == NIL_UUID:
            obj_in = obj_in.model_copy(update={"id": uuid.uuid4()})
        return await super().create(db, obj_in=obj_in)


class EventSendingCompanyRepository:
    """
    저장소 호출이 성공한 뒤에만 변경 이벤트를 보냅니다.
    - 저장소 오류는 그대로 전파되고 이벤트는 보내지 않습니다.
    - 이벤트 전송이 실패하면 EventSendError를 던집니다. 이미 커밋된 쓰기는 되돌리지 않습니다.
    - get은 그대로 위임하며 이벤트를 만들지 않습니다.
    """

    def __init__(self, repo: CompanyRepository, event_sender: CompanyEventSender):
        self.repo = repo
        self.event_sender = event_sender

    async def _send(self, event: CompanyEvent) -> None:
        try:
            await self.event_sender.send(event)
        except Exception as e:
            logger.error("변경 이벤트 전송 실패 (쓰기는 이미 커밋됨): action=%s id=%s", event.action.value, event.id)
            raise EventSendError(f"failed to send {event.action.value} event for company {event.id}") from e

    async def create(self, db: AsyncSession, *, obj_in: schemas.CompanyCreate) -> models.Company:
        company = await self.repo.create(db, obj_in=obj_in)
        await self._send(CompanyEvent(
            action=EventAction.INSERT,
            id=company.id,
            state=schemas.CompanyRead.model_validate(company),
        ))
        return company

    async def get(self, db: AsyncSession, id: uuid.UUID) -> models.Company:
        return await self.repo.get(db, id)

    async def patch(self, db: AsyncSession, *, id: uuid.UUID, obj_in: schemas.CompanyUpdate) -> models.Company:
        company = await self.repo.patch(db, id=id, obj_in=obj_in)
        await self._send(CompanyEvent(
            action=EventAction.UPDATE,
            id=id,
            state=schemas.CompanyRead.model_validate(company),
        ))
        return company

    async def delete(self, db: AsyncSession, *, id: uuid.UUID) -> None:
        await self.repo.delete(db, id=id)
        await self._send(CompanyEvent(action=EventAction.DELETE, id=id))


company = CRUDCompany(models.Company)
