"""Engine and session factory for the relational store"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import Settings, settings


def build_engine(config: Settings) -> Engine:
    """In-memory SQLite shared across threads while testing, pooled DATABASE_URL otherwise"""
    if config.TESTING:
        return create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        config.DATABASE_URL,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
    )


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Request-scoped session; closed once the response is sent"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
