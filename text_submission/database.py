from sqlmodel import SQLModel, Session, create_engine
from .config import DATABASE_URL, SQL_ECHO

# SQLite needs this so a session can cross into FastAPI's threadpool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# SQLAlchemy database engine
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


def create_db_and_tables():
    # Registers the table on SQLModel.metadata
    from .models import text_submission  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
