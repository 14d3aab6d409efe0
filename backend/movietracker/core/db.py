from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.engine import make_url
from sqlmodel import Session, create_engine

from movietracker.core.config import settings
from movietracker.exceptions.config_exceptions import DatabaseNotConfiguredError


class Database:
    """
    Handle on the backing store.

    Owns the engine (and with it the connection pool). ``init`` is called on
    application startup and ``dispose`` on shutdown; every request borrows one
    session through ``session``. An instance built without a URL stays
    unconfigured and refuses to hand out sessions.
    """

    def __init__(
        self,
        url: str | None,
        *,
        pool_size: int = settings.DB_POOL_SIZE,
        pool_timeout: int = settings.DB_POOL_TIMEOUT,
        pool_recycle: int = settings.DB_POOL_RECYCLE,
        echo: bool = settings.DB_ECHO,
    ):
        self.url = url
        self.pool_size = pool_size
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.echo = echo
        self.engine: Engine | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    def init(self) -> None:
        if not self.url:
            logger.error("DATABASE_URL is not configured")
            return
        if self.engine is not None:
            return

        if make_url(self.url).get_backend_name() == "sqlite":
            self.engine = create_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
            )
        else:
            self.engine = create_engine(
                self.url,
                echo=self.echo,
                pool_size=self.pool_size,
                max_overflow=0,
                pool_timeout=self.pool_timeout,
                pool_recycle=self.pool_recycle,
                pool_pre_ping=True,
            )
        logger.info(f"Database engine created for {make_url(self.url).render_as_string()}")

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        if not self.is_configured:
            raise DatabaseNotConfiguredError()
        if self.engine is None:
            self.init()
        with Session(self.engine) as session:
            yield session
