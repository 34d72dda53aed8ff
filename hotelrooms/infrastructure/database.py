from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool, StaticPool

from .config import settings

DATABASE_URL = settings.database_url

Base = declarative_base()


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    In-memory SQLite shares one connection; file-backed SQLite opens a connection per session.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        if parsed.database in (None, "", ":memory:"):
            return create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(url, echo=echo, poolclass=NullPool)
    return create_async_engine(url, echo=echo)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, expire_on_commit=False)


async def create_schema(bind: AsyncEngine) -> None:
    from hotelrooms.infrastructure.models import models  # noqa: F401 - registers tables on Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


engine = build_engine(DATABASE_URL, echo=settings.echo_sql)
SessionLocal = build_sessionmaker(engine)
