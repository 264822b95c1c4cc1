from functools import lru_cache
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_TITLE_DEFAULT: Final[str] = "Library API"
APP_VERSION_DEFAULT: Final[str] = "0.1.0"
APP_DESCRIPTION_DEFAULT: Final[str] = "Library management backend (FastAPI)"

CLIENT_APP_NAME_DEFAULT: Final[str] = "libraryApp"
DATABASE_URL_DEFAULT: Final[str] = "sqlite:///./library.db"

DEFAULT_PAGE_SIZE: Final[int] = 20
MAX_PAGE_SIZE: Final[int] = 2000


class Settings(BaseSettings):
    """
    애플리케이션 전역 설정.
    Global application settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BACKEND_",
        extra="ignore",
    )

    app_title: str = APP_TITLE_DEFAULT
    app_version: str = APP_VERSION_DEFAULT
    app_description: str = APP_DESCRIPTION_DEFAULT

    environment: str = Field(
        default="local",
        description=(
            "실행 환경(local/dev/prod 등) / "
            "Runtime environment (local/dev/prod, etc.)."
        ),
    )
    debug: bool = Field(
        default=False,
        description="디버그 모드 활성화 여부 / Whether to enable debug mode.",
    )
    log_level: str = Field(
        default="INFO",
        description="루트 로거 레벨 / Root logger level.",
    )

    client_app_name: str = Field(
        default=CLIENT_APP_NAME_DEFAULT,
        description=(
            "알림 헤더(X-<name>-alert 등)에 쓰이는 클라이언트 앱 이름.\n"
            "Client application name used in notification headers "
            "(X-<name>-alert, ...)."
        ),
    )
    enable_translation: bool = Field(
        default=True,
        description=(
            "True 면 알림 헤더에 번역 키를, False 면 영어 문장을 넣는다.\n"
            "Emit translation keys in alert headers (True) "
            "or plain English messages (False)."
        ),
    )

    database_url: str = Field(
        default=DATABASE_URL_DEFAULT,
        description="SQLAlchemy 데이터베이스 URL / SQLAlchemy database URL.",
    )
    database_echo: bool = Field(
        default=False,
        description="SQL 로그 출력 여부 / Echo emitted SQL.",
    )
    create_tables_on_startup: bool = Field(
        default=True,
        description=(
            "시작 시 테이블을 생성할지 여부.\n"
            "Whether to create missing tables on startup."
        ),
    )

    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(default=MAX_PAGE_SIZE, ge=1)


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()
