import logging
from typing import Generator
from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


class Database:
    """Owns the SQLAlchemy engine and session factory for one application"""

    def __init__(self, url: str, echo: bool = False):
        if url.startswith("sqlite"):
            # Sessions are used from FastAPI's threadpool
            engine_options = {"connect_args": {"check_same_thread": False}}
        else:
            engine_options = {
                "pool_size": 10,
                "max_overflow": 20,
                "pool_pre_ping": True,
                "pool_recycle": 300,
            }

        self.engine = create_engine(url, echo=echo, **engine_options)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        @event.listens_for(self.engine, "connect")
        def receive_connect(dbapi_connection, connection_record):
            logger.info("Database connection established")

        @event.listens_for(self.engine, "checkout")
        def receive_checkout(dbapi_connection, connection_record, connection_proxy):
            logger.debug("Database connection checked out from pool")

    def session(self) -> Session:
        return self.SessionLocal()

    def init_db(self) -> bool:
        """
        Create database tables

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            # Import all models here to ensure they are registered
            from ..models import task, user  # noqa: F401

            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created successfully")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database: {e}")
            return False

    def check_connection(self) -> bool:
        """
        Check database connectivity

        Returns:
            bool: True if connected, False otherwise
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def dispose(self):
        self.engine.dispose()
        logger.info("Database engine disposed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI

    Yields:
        Session: Database session bound to the application's engine
    """
    db = request.app.state.database.session()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()
