import logging
import ssl
from contextlib import asynccontextmanager
from typing import AsyncIterator
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.models.orm.base import Base

logger = logging.getLogger(__name__)


def prepare_database_url(url: str) -> tuple[str, dict]:
    """
    Prepare database URL for asyncpg compatibility.
    asyncpg doesn't support 'sslmode' parameter, need to convert to 'ssl' context.
    """
    if not url:
        return url, {}

    parsed = urlparse(url)
    query_params = parse_qs(parsed.query)

    if 'sslmode' not in query_params:
        return url, {}

    connect_args = {}
    sslmode = query_params.pop('sslmode')[0]

    if sslmode == 'require':
        # SSL required, certificates not verified
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        connect_args['ssl'] = ssl_context
    elif sslmode == 'verify-ca' or sslmode == 'verify-full':
        connect_args['ssl'] = ssl.create_default_context()
    elif sslmode == 'disable':
        connect_args['ssl'] = False

    new_query = urlencode(query_params, doseq=True)

    cleaned_url = urlunparse((
        parsed.scheme,
        parsed.netloc,
        parsed.path,
        parsed.params,
        new_query,
        parsed.fragment
    ))

    return cleaned_url, connect_args


class Database:
    """Owns the async engine and hands out sessions to repositories."""

    def __init__(self, db_url: str, echo: bool = False) -> None:
        cleaned_url, connect_args = prepare_database_url(db_url)

        engine_kwargs = {"echo": echo, "connect_args": connect_args}
        if cleaned_url.startswith("sqlite"):
            # aiosqlite connections must not outlive the loop that opened them
            engine_kwargs["poolclass"] = NullPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self._engine = create_async_engine(cleaned_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self):
        return self._engine

    async def create_database(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        session: AsyncSession = self._session_factory()
        try:
            yield session
        except Exception:
            logger.warning("[DB] session rollback because of exception")
            await session.rollback()
            raise
        finally:
            await session.close()
