from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from env import DATABASE_URL

# sqlite needs this flag because FastAPI serves requests from a thread pool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    # import models so they are registered on Base.metadata
    from db import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
