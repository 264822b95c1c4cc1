"""
SQLAlchemy 엔진/세션 구성.
SQLAlchemy engine and session setup.
"""

from collections.abc import Iterator
from functools import lru_cache
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings


class Base(DeclarativeBase):
    """
    모든 ORM 엔티티의 선언적 베이스.
    Declarative base for all ORM entities.
    """


def make_engine(url: str, *, echo: bool = False) -> Engine:
    """
    URL 로부터 엔진을 만든다.
    Build an engine from a database URL.

    - sqlite 는 스레드풀에서 접근하므로 check_same_thread 를 끈다.
    - 인메모리 sqlite 는 연결마다 DB 가 달라지므로 StaticPool 로 하나를 공유한다.
    """
    kwargs: dict[str, Any] = {"echo": echo}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_engine(url, **kwargs)


@lru_cache
def get_engine() -> Engine:
    """설정 기반 엔진(캐시됨) / Settings-based engine (cached)."""
    settings = get_settings()
    return make_engine(settings.database_url, echo=settings.database_echo)


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    """설정 기반 세션 팩토리(캐시됨) / Settings-based session factory (cached)."""
    return sessionmaker(bind=get_engine(), expire_on_commit=False)


def create_tables(engine: Engine) -> None:
    """
    등록된 모든 엔티티 테이블을 생성한다(이미 있으면 건너뜀).
    Create tables for every registered entity (existing tables are kept).
    """
    # 엔티티 모듈을 import 해야 Base.metadata 에 테이블이 등록된다.
    # Entity modules must be imported to register their tables.
    import app.models.model_db_publisher  # noqa: F401

    Base.metadata.create_all(engine)


def get_db_session() -> Iterator[Session]:
    """
    요청 단위 세션을 제공하는 FastAPI 의존성.
    FastAPI dependency yielding one session per request.

    예외가 나면 롤백하고 다시 던진다. 세션은 항상 닫는다.
    Rolls back and re-raises on error; always closes the session.
    """
    session = get_session_factory()()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
