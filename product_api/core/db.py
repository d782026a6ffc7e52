import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from product_api.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Engine plus session factory for one database.

    Built once by the application factory and handed to request handlers
    through ``get_db``; tests construct their own against SQLite.
    """

    def __init__(self, url: str, **engine_kwargs):
        engine_kwargs.setdefault("pool_pre_ping", True)
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        connect_args = {"sslmode": "require"} if settings.DATABASE_SSL else {}
        return cls(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        # Import models so Base.metadata knows them
        import product_api.models  # noqa

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        import product_api.models  # noqa

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def connect_db(database: Database) -> bool:
    """Authenticate and sync the schema. Failures are logged, never raised."""
    try:
        with database.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database.create_all()
    except SQLAlchemyError:
        logger.error("There was an error connecting to the database", exc_info=True)
        return False
    logger.info("Connected to the database")
    return True


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
