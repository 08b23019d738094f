from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request
from sqlalchemy import Column, DateTime, String, create_engine, event, text
from sqlalchemy.types import TypeDecorator
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .config import Settings

Base = declarative_base()


class ValidationFailure(Exception):
    """Raised by the store when a record is missing a required field"""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid4().hex


class UTCDateTime(TypeDecorator):
    """Timestamp stored in UTC and always read back timezone-aware.

    SQLite keeps no offset, so naive values coming out of the store are UTC.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def casefold(value):
    return value.casefold() if value else value


def _register_sqlite_functions(dbapi_conn, connection_record):
    # SQLite's own lower() only folds ASCII letters
    dbapi_conn.create_function("py_lower", 1, casefold, deterministic=True)


class StoredRecord:
    """Columns shared by every collection: string id plus store-kept timestamps.

    Subclasses list their required attributes in ``__required__`` as a mapping
    of attribute name to stored field name; they are checked on every flush.
    """

    __required__ = {}

    id = Column(String(32), primary_key=True, default=new_id)
    created_at = Column(UTCDateTime, default=utcnow, index=True)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow)

    def check_required(self):
        for attr, field in self.__required__.items():
            value = getattr(self, attr)
            if value is None or value == "":
                raise ValidationFailure(
                    f"{type(self).__name__} validation failed: "
                    f"{field}: Path `{field}` is required."
                )


def _check_required_fields(session, flush_context, instances):
    for obj in list(session.new) + list(session.dirty):
        if isinstance(obj, StoredRecord):
            obj.check_required()


@dataclass
class AppContext:
    """Process-wide state built once at startup and shared by every handler"""
    settings: Settings
    engine: Engine
    session_factory: sessionmaker

    def check_connection(self):
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_tables(self):
        from . import models  # noqa: F401  registers every table on Base

        Base.metadata.create_all(bind=self.engine)


def create_context(settings: Settings) -> AppContext:
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        # requests are served from a thread pool
        connect_args["check_same_thread"] = False

    # Use pre_ping to validate connections (good for Postgres in production)
    engine = create_engine(
        settings.database_url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _register_sqlite_functions)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    event.listen(session_factory, "before_flush", _check_required_fields)
    return AppContext(settings=settings, engine=engine, session_factory=session_factory)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(request: Request):
    """Dependency to get database session"""
    db = get_context(request).session_factory()
    try:
        yield db
    finally:
        db.close()
