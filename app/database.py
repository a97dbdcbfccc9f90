from sqlmodel import SQLModel, create_engine, Session
from app.config import settings


connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,      # checks dead connections
    connect_args=connect_args,
)


def create_db_and_tables():
  from app.models import book
  SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
