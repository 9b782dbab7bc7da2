"""
Database connection lifecycle for the record store.

One ``Database`` is built per process and handed to every repository. Each
repository call runs inside its own ``session_scope()``: a connection is
taken from the engine, the work is committed or rolled back as a unit, and
the connection is released before the call returns.
"""
import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings, BASE_DIR
from app.helpers.exception_handler import StorageError, StorageUnavailable
from app.models import Base

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, url: Optional[str] = None, echo: bool = False):
        self.url = url or settings.DATABASE_URL
        connect_args = {"check_same_thread": False} if self.url.startswith("sqlite") else {}
        self.engine: Engine = create_engine(self.url, echo=echo, connect_args=connect_args)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def create_tables(self) -> None:
        """Create any missing table. Existing tables and their rows are left alone."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except DBAPIError as e:
            logger.error(f"Could not create tables at {self.url}: {e}")
            raise StorageUnavailable(f"Database is unavailable: {e.orig}") from e
        logger.info(f"Tables ready at {self.url}")

    def upgrade_schema(self, revision: str = "head") -> None:
        """Bring an existing database file up to the latest Alembic revision."""
        from alembic import command
        from alembic.config import Config

        config = Config(settings.ALEMBIC_CONFIG_FILE)
        config.set_main_option("script_location", os.path.join(BASE_DIR, "alembic"))
        config.set_main_option("sqlalchemy.url", self.url)
        config.attributes["configure_logger"] = False
        command.upgrade(config, revision)
        logger.info(f"Schema at {self.url} upgraded to {revision}")

    def ping(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except DBAPIError as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            try:
                session.connection()
            except DBAPIError as e:
                logger.error(f"Error connecting to the database: {e}")
                raise StorageUnavailable(f"Database is unavailable: {e.orig}") from e
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Database operation failed: {e}") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database
