# app/domains/company/events.py

"""
회사 데이터 변경 이벤트와 이벤트 전송기(sender)를 정의하는 모듈입니다.

- CompanyEvent: 생성/수정/삭제 한 건을 설명하는 메시지. DB에 저장되지 않습니다.
- NoopCompanyEventSender: 이벤트를 로그로만 남기는 기본 구현.
- ArqCompanyEventSender: 이벤트를 arq 작업으로 Redis 큐에 넣는 구현.
  큐의 소비자는 tasks.handle_company_event 입니다.
"""

import logging
import uuid
from enum import Enum
from typing import Any, Optional, Protocol

from sqlmodel import SQLModel, Field

from .schemas import CompanyRead

logger = logging.getLogger(__name__)

# arq 워커에 등록된 태스크 이름 (tasks.handle_company_event)
HANDLE_COMPANY_EVENT_TASK = "handle_company_event"


class EventAction(str, Enum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class CompanyEvent(SQLModel):
    """
    변경 이벤트 본문입니다. 삭제 이벤트에는 state가 없습니다.
    """
    action: EventAction
    id: uuid.UUID
    state: Optional[CompanyRead] = Field(None, description="변경 후 전체 상태 (insert/update)")


class CompanyEventSender(Protocol):
    """이벤트 버스 계약입니다. 전송에 실패하면 예외를 던져야 합니다."""

    async def send(self, event: CompanyEvent) -> None:
        ...


class NoopCompanyEventSender:
    """아무 곳에도 보내지 않고 로그만 남기는 전송기입니다."""

    async def send(self, event: CompanyEvent) -> None:
        logger.info("noop event has been sent: %s", event.model_dump_json())


class ArqCompanyEventSender:
    """
    이벤트를 JSON 직렬화하여 arq 작업으로 등록합니다.
    redis는 arq.connections.create_pool()이 반환한 ArqRedis 풀입니다.
    """

    def __init__(self, redis: Any):
        self.redis = redis

    async def send(self, event: CompanyEvent) -> None:
        job = await self.redis.enqueue_job(HANDLE_COMPANY_EVENT_TASK, event.model_dump(mode="json"))
        logger.debug("ARQ Job enqueued: %s for company %s (job=%s)", HANDLE_COMPANY_EVENT_TASK, event.id, job)
