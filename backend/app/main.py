from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database import create_tables, get_engine
from app.logging_config import configure_logging
from app.routers.router_health import router as router_health
from app.routers.router_publisher import router as router_publisher


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """
    시작 시 로깅을 설정하고, 설정에 따라 테이블을 생성한다.
    Configure logging and, if enabled, create tables on startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.create_tables_on_startup:
        create_tables(get_engine())

    logger.info(
        "%s %s started (environment=%s)",
        settings.app_title,
        settings.app_version,
        settings.environment,
    )
    yield


def create_app() -> FastAPI:
    """
    설정을 읽어 FastAPI 애플리케이션을 조립한다.
    Assemble the FastAPI application from settings.
    """
    settings = get_settings()

    application = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # 알림/페이지네이션 헤더를 브라우저 클라이언트가 읽을 수 있도록 노출한다.
    # Expose alert and pagination headers to browser clients.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "Location",
            "Link",
            "X-Total-Count",
            f"X-{settings.client_app_name}-alert",
            f"X-{settings.client_app_name}-error",
            f"X-{settings.client_app_name}-params",
        ],
    )

    # 도메인 라우터 등록 / Register domain routers
    application.include_router(router_health, prefix="/health", tags=["health"])
    application.include_router(router_publisher, prefix="/api", tags=["publisher"])

    return application


app = create_app()
