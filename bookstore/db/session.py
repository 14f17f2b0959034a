import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from bookstore.core.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """
    Store handle: one engine and its session factory.

    Created once per process (application lifespan or a script), passed to
    whatever needs a session, and disposed when the process stops.
    """

    def __init__(self, url: str, echo: bool = False, timeout: Optional[float] = None):
        self.url = url
        self.timeout = timeout
        self.engine = create_async_engine(url, echo=echo)
        self.session_factory = async_sessionmaker(
            autoflush=False,
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            info={"store_timeout": timeout},
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DATABASE_URL, echo=settings.DB_ECHO, timeout=settings.STORE_TIMEOUT_SECONDS)

    async def init(self):
        from bookstore.db.models.scheme import Base
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database initialized successfully.")

    async def dispose(self):
        await self.engine.dispose()
        logger.info("Database connections closed.")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        An async context manager that provides a database session.
        It yields a DB session that the session factory closes on exiting the 'async with' block.

        usage:
        async with database.session() as session:
            books = await get_book_service(session).list_books()
        """
        async with self.session_factory() as session:
            yield session


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with get_database(request).session() as session:
        yield session
