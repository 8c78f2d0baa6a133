"""
Database engine and session management.

Usage:
    db = Database(config.db)
    db.create_all()

    with db.session() as session:
        session.add(record)
"""

from contextlib import contextmanager
from typing import Generator, Optional, Union

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import DatabaseConfig
from .models import Base

logger = structlog.get_logger()


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


class Database:
    """Owns one engine and its session factory.

    Services receive a Database instance instead of reaching for a
    module-level engine.
    """

    def __init__(self, config: Optional[Union[DatabaseConfig, str]] = None) -> None:
        if isinstance(config, str):
            config = DatabaseConfig(url=config)
        self.config = config or DatabaseConfig()

        engine_kwargs = {}
        if self.config.is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_url(self.config.url):
                # In-memory SQLite exists only on a single connection.
                engine_kwargs["poolclass"] = StaticPool

        logger.info("database_engine_created", url=self.config.url.split("@")[-1])
        self.engine: Engine = create_engine(self.config.url, echo=self.config.echo, **engine_kwargs)
        self._session_factory = sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False,
        )

    def create_all(self) -> None:
        """Create any missing tables."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session that commits on success and rolls back on error."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        logger.info("database_engine_disposed")
        self.engine.dispose()
