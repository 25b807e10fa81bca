from pathlib import Path
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from .settings import settings

# check_same_thread=False is needed only for SQLite
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine_kwargs = {}
if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
    # One shared connection, otherwise every thread gets its own empty database
    engine_kwargs["poolclass"] = StaticPool

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, **engine_kwargs)

def ensure_sqlite_directory(database_url: str) -> None:
    """
    Creates the parent directory of a file-backed SQLite database.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)

def create_db_and_tables():
    ensure_sqlite_directory(settings.DATABASE_URL)
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
