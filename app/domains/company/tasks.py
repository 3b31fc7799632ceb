# app/domains/company/tasks.py

import logging
from typing import Any, Dict

from .events import CompanyEvent

logger = logging.getLogger(__name__)


async def handle_company_event(ctx: Dict[str, Any], payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    ArqCompanyEventSender가 큐에 넣은 회사 변경 이벤트를 소비하는 ARQ 태스크입니다.
    이벤트 본문을 검증한 뒤 로그로 남깁니다.
    """
    event = CompanyEvent.model_validate(payload)
    logger.info(
        "회사 변경 이벤트 수신: action=%s id=%s job_try=%s",
        event.action.value, event.id, ctx.get("job_try"),
    )
    return {"status": "ok", "action": event.action.value, "id": str(event.id)}
