import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _import_models() -> None:
    from careerbridge.models import (  # noqa: F401
        Account,
        CompanyProfile,
        CandidateProfile,
        JobPosting,
        Application,
        SavedJob,
        BlobFile,
        BlobChunk,
    )


class Database:
    """
    One engine + session factory for the life of the process.
    Open at startup, dispose at shutdown; the engine is created on first use.
    """

    def __init__(self, url: str):
        self.url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    def connect(self) -> Engine:
        if self._engine is None:
            kwargs: dict = {"pool_pre_ping": True}
            if self.url.startswith("sqlite"):
                kwargs["connect_args"] = {"check_same_thread": False}
                if ":memory:" in self.url or self.url.rstrip("/") == "sqlite:":
                    kwargs["poolclass"] = StaticPool
            self._engine = create_engine(self.url, **kwargs)
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
            logger.info("Database engine created for %s", self._engine.url.render_as_string(hide_password=True))
        return self._engine

    def session(self) -> Session:
        self.connect()
        return self._session_factory()

    def create_all(self) -> list[str]:
        """Create any missing tables without touching existing data. Returns created table names."""
        _import_models()
        engine = self.connect()
        try:
            existing_tables = set(inspect(engine).get_table_names())
            Base.metadata.create_all(bind=engine)
            created = sorted(set(Base.metadata.tables.keys()) - existing_tables)
            if created:
                logger.info("Created missing DB tables: %s", ", ".join(created))
            else:
                logger.info("All DB tables already exist; no schema changes applied.")
            return created
        except Exception as e:
            logger.exception("Ensure tables failed: %s", e)
            raise

    def ping(self) -> None:
        with self.connect().connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
