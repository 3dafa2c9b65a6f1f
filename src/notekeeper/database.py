# Database connection setup
from typing import Any, AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings
from .core.models.base import BaseModel


class Database:
    """Async engine plus session factory, built once per application."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any):
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that is closed afterwards."""
        async with self.session_factory() as session:
            yield session

    async def create_tables(self) -> None:
        """Create all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Get database session."""
    db: Database = request.app.state.db
    async for session in db.session():
        yield session
