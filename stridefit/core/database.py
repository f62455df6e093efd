from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from stridefit.core.config import settings


def create_sync_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # The CLI and the tests share one process-local connection pool
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = create_sync_engine(settings.DATABASE_URL, echo=settings.DEBUG)

session_maker = sessionmaker(
    engine,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


def init_db(bind: Optional[Engine] = None) -> None:
    """Create the local persistence tables if they do not exist yet."""
    # Register the mapped tables on Base.metadata
    from stridefit.models import storage  # noqa: F401

    Base.metadata.create_all(bind or engine)
