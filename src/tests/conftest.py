import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from core.db import init_db


@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    with Session(engine, expire_on_commit=False) as session:
        yield session
