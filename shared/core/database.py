import logging

from fastapi import HTTPException
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from shared.core.config import RENTAL_DATABASE_URL

logger = logging.getLogger(__name__)

Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2


def build_engine(url: str):
    if url.startswith("sqlite"):
        # in-memory databases live on a single shared connection
        in_memory = url in ("sqlite://", "sqlite:///:memory:")
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool if in_memory else None,
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,    # max temporary extra connections
        pool_timeout=30               # wait time before failing
    )


rental_engine = build_engine(RENTAL_DATABASE_URL)
RentalSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=rental_engine)


# Dependency
def get_rental_db():
    db = RentalSessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_rollback(db: Session, conflict_message: str = "Record already exists"):
    """Commit the unit of work; nothing is left half-written on failure."""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(conflict_message)
        raise HTTPException(status_code=409, detail=conflict_message)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database write failed")
        raise
