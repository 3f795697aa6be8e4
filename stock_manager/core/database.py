from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from stock_manager.core.config import settings


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


# SQLite 내장 lower()는 ASCII만 변환하므로 파이썬 str.lower()로 교체
def _register_sqlite_functions(dbapi_connection, connection_record):
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str):
    # SQLite는 스레드 공유 허용, 인메모리 DB는 단일 커넥션 유지
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(url, **kwargs)
        event.listen(sqlite_engine, "connect", _register_sqlite_functions)
        return sqlite_engine
    return create_engine(url, pool_pre_ping=True)


# SQLAlchemy 엔진
engine = build_engine(settings.database_url)

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()


# 작업 단위(unit of work) 세션 스코프
@contextmanager
def session_scope(factory: sessionmaker = SessionLocal) -> Iterator[Session]:
    """
    세션 하나를 열고, 블록이 어떤 경로로 끝나든 반드시 닫는다.
    예외 발생 시 커밋되지 않은 변경은 롤백한 뒤 예외를 그대로 전달한다.
    """
    db = factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# DB 세션 의존성 (FastAPI)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
