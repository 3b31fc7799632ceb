# app/core/migrations.py

"""
Alembic 마이그레이션을 코드에서 실행하기 위한 모듈입니다.
애플리케이션 시작 시 lifespan에서 한 번 호출됩니다 (RUN_MIGRATIONS=true).
"""

import logging
import os

from alembic import command
from alembic.config import Config

from app.core.config import BASE_DIR, Settings

logger = logging.getLogger(__name__)

ALEMBIC_INI = os.path.join(BASE_DIR, "alembic.ini")


def run_migrations(settings: Settings) -> None:
    """
    'alembic upgrade head'와 동일한 작업을 수행합니다.
    migrations/env.py는 asyncio.run()으로 비동기 엔진을 돌리므로,
    이벤트 루프가 이미 실행 중인 곳에서는 별도 스레드에서 호출해야 합니다.
    """
    alembic_cfg = Config(ALEMBIC_INI)
    alembic_cfg.set_main_option("script_location", os.path.join(BASE_DIR, "migrations"))
    # env.py가 같은 설정 객체(같은 DATABASE_URL)를 사용하도록 전달합니다.
    alembic_cfg.attributes["settings"] = settings
    logger.info("Alembic 마이그레이션 적용 시작 (upgrade head)")
    command.upgrade(alembic_cfg, "head")
    logger.info("Alembic 마이그레이션 적용 완료")
