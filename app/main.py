# app/main.py

import asyncio
import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from arq.connections import create_pool, RedisSettings
from fastapi import FastAPI, Depends, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel.ext.asyncio.session import AsyncSession

from app import APP_NAME, APP_VERSION
from app.core.config import Settings, get_settings
from app.core.database import create_db_engine, create_session_factory
from app.core.dependencies import get_db_session
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.core.migrations import run_migrations
from app.domains.company import crud as company_crud
from app.domains.company.events import ArqCompanyEventSender, NoopCompanyEventSender
from app.domains.company.routers import router as company_router
from app.domains.company.services import CompanyService

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(마이그레이션, ARQ Redis, DB 엔진)를 함께 처리합니다.
    """
    settings: Settings = app.state.settings
    logger.info("FastAPI 애플리케이션 시작 중...")

    try:
        # 1. 마이그레이션 적용 (env.py가 asyncio.run()을 사용하므로 별도 스레드에서 실행)
        if settings.RUN_MIGRATIONS:
            await asyncio.to_thread(run_migrations, settings)

        # 2. arq 백엔드를 쓰는 경우에만 Redis 커넥션 풀을 만들고 저장소에 이벤트 데코레이터를 씌웁니다.
        if settings.EVENT_SENDER_ENABLED and settings.EVENT_SENDER_BACKEND == "arq":
            logger.info("ARQ Redis 커넥션 풀을 생성합니다...")
            app.state.redis = await create_pool(
                RedisSettings(host=settings.REDIS_HOST, port=settings.REDIS_PORT)
            )
            app.state.company_service = CompanyService(
                company_crud.EventSendingCompanyRepository(
                    company_crud.company, ArqCompanyEventSender(app.state.redis)
                )
            )

        yield  # 애플리케이션 실행
    finally:
        # 시작 도중 실패한 경우에도 만들어진 자원은 모두 정리합니다.
        logger.info("FastAPI 애플리케이션 종료 중...")
        if app.state.redis is not None:
            await app.state.redis.close()
            app.state.redis = None
            logger.info("ARQ Redis 연결 풀 종료 완료.")

        await app.state.engine.dispose()
        logger.info("데이터베이스 연결 풀 종료 완료.")


def build_company_service(settings: Settings) -> CompanyService:
    """
    설정에 따라 기본 저장소 또는 이벤트 전송 데코레이터를 씌운 저장소로 서비스를 구성합니다.
    arq 백엔드는 Redis 풀이 필요하므로 lifespan에서 다시 구성합니다.
    """
    company_repo: company_crud.CompanyRepository = company_crud.company
    if settings.EVENT_SENDER_ENABLED:
        company_repo = company_crud.EventSendingCompanyRepository(company_repo, NoopCompanyEventSender())
    return CompanyService(company_repo)


def create_app(settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None) -> FastAPI:
    """
    FastAPI 애플리케이션 인스턴스를 생성합니다.
    설정 객체, DB 엔진, 세션 공장, 회사 서비스는 모두 app.state에 보관됩니다.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=APP_NAME,
        description="CRUD API for company records. Every mutation can emit a change event.",
        version=APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine or create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.company_service = build_company_service(settings)
    app.state.redis = None

    # -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(company_router)

    # -- 루트 엔드포인트 --
    @app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
    async def read_root():
        return {"message": f"Welcome to {APP_NAME}. Visit /docs for interactive API documentation."}

    # -- 헬스 체크 엔드포인트 --
    @app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
    async def health_check(session: AsyncSession = Depends(get_db_session)):
        """
        데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
        """
        try:
            result = await session.execute(text("SELECT 1"))
            if result.scalar_one_or_none() == 1:
                return {"status": "ok", "database_connection": "successful"}
            logger.error("Database health check failed: No result from test query")
        except Exception as e:
            logger.error("Database connection error during health check: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "database_connection": "failed"},
        )

    return app


# -- Uvicorn 서버 직접 실행 --
# python -m app.main 으로 실행하면 LISTEN_HOST_PORT에 바인딩합니다.
if __name__ == "__main__":
    import uvicorn

    app_settings = get_settings()
    host, port = app_settings.listen_address
    uvicorn.run(create_app(app_settings), host=host, port=port)
