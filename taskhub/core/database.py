from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool
from fastapi import Request
import logging

from taskhub.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _connect_args(url: str, timeout: float) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": timeout}
    if url.startswith("postgresql"):
        return {
            "connect_timeout": max(1, int(timeout)),
            "options": f"-c statement_timeout={int(timeout * 1000)}",
        }
    return {}


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Store client: owns the engine and hands out sessions.

    Built once by ``create_app`` and passed down through ``app.state``; nothing
    in the package holds a module-level engine.
    """

    def __init__(self, settings: Settings):
        url = settings.DATABASE_URL
        kwargs = {
            "echo": settings.SQL_ECHO,
            "connect_args": _connect_args(url, settings.DB_TIMEOUT_SECONDS),
        }
        if url in ("sqlite://", "sqlite:///:memory:"):
            # une seule connexion partagée, sinon chaque session voit une base vide
            kwargs["poolclass"] = StaticPool

        self.engine: Engine = create_engine(url, **kwargs)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
            info={
                "read_retries": settings.DB_READ_RETRIES,
                "atomic_task_writes": settings.TASK_WRITES_ATOMIC,
            },
        )

    def create_schema(self) -> None:
        # registers every mapped class on Base.metadata
        import taskhub.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready")

    def drop_schema(self) -> None:
        import taskhub.models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error(f"Database ping failed: {exc}")
            return False
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    """Dépendance sessionDB: one session per request."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
