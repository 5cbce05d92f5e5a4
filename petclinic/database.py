from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from petclinic.config import settings

connect_args = {}
if settings.is_sqlite:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    connect_args = {'check_same_thread': False}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=False,
    pool_pre_ping=True,  # Verify connections are alive before using
)


# Enforce foreign keys on SQLite connections
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    if not settings.is_sqlite:
        return
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
