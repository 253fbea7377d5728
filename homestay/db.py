import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from homestay.config import DATABASE_URL


def _connect_args(url):
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def _ensure_sqlite_dir(url):
    if not url.startswith("sqlite:///"):
        return
    path = url.replace("sqlite:///", "", 1)
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)


def init_database(bind=None):
    """Create all tables on the given engine (the app engine by default)."""
    # Tables register themselves on Base when their modules are imported.
    from homestay.models import (  # noqa: F401
        message, post, project, room, service, session, user,
    )

    bind = bind or engine
    _ensure_sqlite_dir(str(bind.url))
    Base.metadata.create_all(bind=bind)


def get_db():
    """Provide a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
