"""Database connection pool and session management."""

import logging
import ssl
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from tenantkit.config import Settings

logger = logging.getLogger(__name__)

SSL_OFF_MODES = {"disable", "allow"}
SSL_FALSE_VALUES = {"", "0", "false", "off", "no", "disable"}


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


def _make_permissive_ssl_context() -> ssl.SSLContext:
    """SSL context for managed Postgres - encrypts but skips certificate verification."""
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def get_engine_url_and_connect_args(settings: Settings) -> tuple[str, dict]:
    """Strip sslmode from URL (asyncpg doesn't accept it) and add SSL via connect_args."""
    url = settings.database_url
    connect_args = {}
    parsed = urlparse(url)
    query = parse_qs(parsed.query, keep_blank_values=True)
    sslmode = query.pop("sslmode", [None])[-1]
    ssl_flag = query.pop("ssl", [None])[-1]
    if sslmode is not None or ssl_flag is not None:
        new_query = urlencode(query, doseq=True)
        url = urlunparse(parsed._replace(query=new_query))

    # An explicit sslmode=disable/allow or ssl=false wins over APP_ENV.
    if sslmode is not None:
        use_ssl = sslmode.lower() not in SSL_OFF_MODES
    elif ssl_flag is not None:
        use_ssl = ssl_flag.lower() not in SSL_FALSE_VALUES
    else:
        use_ssl = settings.is_production
    if use_ssl:
        connect_args["ssl"] = _make_permissive_ssl_context()
    return url, connect_args


class DatabasePool:
    """Shared async engine, built on first use and reused afterwards.

    One instance owns one engine. ``engine`` creates it at most once;
    ``dispose`` closes it and may be called any number of times, including
    when the engine was never created.
    """

    def __init__(self, settings: Settings, pool_size: int = 1, max_overflow: int = 0):
        self.settings = settings
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            url, connect_args = get_engine_url_and_connect_args(self.settings)
            logger.debug("Creating database engine (pool_size=%s)", self.pool_size)
            self._engine = create_async_engine(
                url,
                echo=self.settings.log_level.upper() == "DEBUG",
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                connect_args=connect_args,
            )
        return self._engine

    def session(self) -> AsyncSession:
        """Open a new session bound to the shared engine."""
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_maker()

    async def dispose(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.debug("Database engine disposed")
