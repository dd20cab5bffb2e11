import logging
import threading

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

from clubhub.constant_file import DATABASE_URL

logger = logging.getLogger(__name__)

Base = declarative_base()


class Store:
    """Lazily connected handle to the relational store.

    One instance is shared by every request in the process. The engine is
    created on the first call to ``connect()``; concurrent first callers
    wait on the lock so only one engine is ever built.
    """

    def __init__(self, url: str = DATABASE_URL, create_tables: bool = True):
        self.url = url
        self.create_tables = create_tables
        self._engine = None
        self._session_factory = None
        self._lock = threading.Lock()

    @property
    def engine(self):
        return self.connect()

    def connect(self):
        if self._engine is not None:
            return self._engine
        with self._lock:
            if self._engine is None:
                engine = create_engine(self.url, **self._engine_options())
                if self.create_tables:
                    try:
                        Base.metadata.create_all(bind=engine)
                    except Exception as e:
                        logger.warning("Could not create database tables: %s", e)
                self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
                self._engine = engine
                logger.info("Store connected")
        return self._engine

    def _engine_options(self) -> dict:
        if not self.url.startswith("sqlite"):
            return {"pool_pre_ping": True}
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in self.url or self.url in ("sqlite://", "sqlite:///"):
            options["poolclass"] = StaticPool
        return options

    def session(self) -> Session:
        self.connect()
        return self._session_factory()

    def ping(self):
        with self.connect().connect() as conn:
            conn.execute(text("SELECT 1"))

    def is_connected(self) -> bool:
        if self._engine is None:
            return False
        try:
            self.ping()
        except Exception as e:
            logger.warning("Store ping failed: %s", e)
            return False
        return True

    def dispose(self):
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._session_factory = None


store = Store()

