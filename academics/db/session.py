from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from academics.core.config import DATABASE_URL, MAX_RECORD_ID

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def enable_sqlite_foreign_keys(target_engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless the pragma is on for each connection."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_pragma(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)


def is_storable_id(value: int) -> bool:
    """Ids past the 64-bit INTEGER range never match a row; the driver refuses to bind them."""
    return 0 < value <= MAX_RECORD_ID
