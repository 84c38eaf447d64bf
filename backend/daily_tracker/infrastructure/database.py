"""Database Session Manager: bounded async connection pool, store-error mapping, health check.

Invariants:
    - One manager per process, built in the app lifespan and kept on app.state
    - Pool holds at most pool_size connections (no overflow); waiters queue up to pool_timeout
    - Every SQLAlchemy exception inside storage_errors() becomes StorageError
      after the session is rolled back; driver detail goes to the log only
    - No retries: the first failure is returned to the caller

Design Decisions:
    - Injected through get_db(request) rather than a module global: tests build
      their own app with their own pool
    - expire_on_commit=False: inserted rows keep their ids after commit
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from daily_tracker.core.errors import StorageError
from daily_tracker.db.base import Base
import daily_tracker.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and a connectivity check."""

    def __init__(
        self,
        database_url: str | URL,
        pool_size: int = 10,
        pool_timeout: float = 30.0,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that rolls back on exception and always closes."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (startup and readiness)."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


@asynccontextmanager
async def storage_errors(
    db: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Translate SQLAlchemy failures inside the block into StorageError."""
    try:
        yield
    except IntegrityError as e:
        await db.rollback()
        logger.error(f"DB integrity error during {operation}: {e}")
        raise StorageError("Integrity constraint violated", operation) from e
    except OperationalError as e:
        await db.rollback()
        logger.error(f"DB operational error during {operation}: {e}")
        raise StorageError("Connection or operational error", operation) from e
    except DBAPIError as e:
        await db.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise StorageError("Database driver error", operation) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise StorageError("Database operation failed", operation) from e


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
