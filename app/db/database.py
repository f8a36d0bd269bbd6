from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_db_engine(database_uri: str) -> Engine:
    """Create the SQLAlchemy engine for the configured store."""
    if database_uri.startswith("sqlite"):
        # In-memory SQLite must share one connection across threads
        return create_engine(
            database_uri,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_uri,
        pool_pre_ping=True,  # Check connections before use
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the users and career_logs tables if they don't exist."""
    # Models must be imported so they register on Base.metadata
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
