from dotenv import load_dotenv
from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

# Load environment variables once, at import time
load_dotenv()


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine for the given URL.

    SQLite connections are shared across the server's worker threads, so
    the same-thread check is switched off for them.
    """
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        return create_engine(database_url, connect_args=connect_args, **kwargs)

    return create_engine(database_url, pool_pre_ping=True, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
    )

class Base(DeclarativeBase):
    pass

def init_db(bind: Engine) -> None:
    # Importing the models registers their tables on Base.metadata
    from employee_api.models.employee import Employee  # noqa: F401

    Base.metadata.create_all(bind=bind)

def get_db(request: Request):
    # create_app puts the session factory for its own DATABASE_URL on app.state
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
