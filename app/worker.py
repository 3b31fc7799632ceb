# app/worker.py

"""
ARQ 워커 설정 모듈입니다.
EVENT_SENDER_BACKEND=arq 일 때 API 서버가 큐에 넣은 회사 변경 이벤트를 소비합니다.

실행: python -m app.worker
    설정 객체를 만든 뒤 REDIS_HOST/REDIS_PORT로 워커를 띄웁니다.
또는: arq app.worker.ArqWorkerSettings
    이 경우 Redis는 arq 기본값(localhost:6379)을 쓰고, 설정은 startup에서 읽습니다.

임포트 시점에는 설정을 만들지 않습니다.
"""

from typing import Any, Dict, Optional

from arq.connections import RedisSettings
from arq.worker import run_worker

from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.domains.company import tasks as company_tasks

# ARQ 워커가 실행할 태스크 함수 목록
worker_functions = [
    company_tasks.handle_company_event,
]


def redis_settings_from(settings: Settings) -> RedisSettings:
    return RedisSettings(host=settings.REDIS_HOST, port=settings.REDIS_PORT)


async def startup(ctx: Dict[str, Any]) -> None:
    """워커 시작 시 설정 객체를 ctx에 보관하고 로깅을 구성합니다."""
    settings: Optional[Settings] = ctx.get("settings")
    if settings is None:
        settings = get_settings()
        ctx["settings"] = settings
    configure_logging(settings)


# ARQ 워커 설정 클래스
class ArqWorkerSettings:
    functions = worker_functions
    on_startup = startup


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    run_worker(
        ArqWorkerSettings,
        redis_settings=redis_settings_from(settings),
        ctx={"settings": settings},
    )


if __name__ == "__main__":
    main()
