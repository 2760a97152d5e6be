from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from core.config import settings


def _connect_args(url: str) -> dict:
    # sqlite's busy timeout is the only driver knob shared by the supported backends
    if url.startswith("sqlite"):
        return {"timeout": settings.DATABASE_TIMEOUT_SECONDS}
    return {"connect_timeout": int(settings.DATABASE_TIMEOUT_SECONDS)}


engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    future=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()


# dependency
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
