"""Engine/session helpers for the contacts store.

The engine and session factory are built on first use and shared by the whole
process; tests reset them with ``get_engine.cache_clear()``.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from contactbook.core.config import get_settings
from contactbook.core.logging import get_logger

Base = declarative_base()
logger = get_logger(__name__)


@lru_cache
def get_engine() -> Engine:
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to read contacts.")
    engine = create_engine(url, future=True, pool_pre_ping=True)
    logger.info("Contacts store engine created (%s)", engine.url.render_as_string(hide_password=True))
    return engine


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    # reads only; nothing is flushed or expired on commit
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def get_session() -> Iterator[Session]:
    session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
