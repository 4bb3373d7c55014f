from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from core.config import settings

# make sure all SQLModel models are imported (models) before initializing DB
# otherwise, SQLModel might not register every table on the metadata
import models  # noqa: F401

engine = create_engine(str(settings.SQLALCHEMY_DATABASE_URI), pool_pre_ping=True)


def init_db(bind: Engine | None = None) -> None:
    SQLModel.metadata.create_all(bind or engine)
