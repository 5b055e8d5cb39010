from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from bestodo.config.settings import Settings
import time
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Engine and session factory for one application instance"""

    def __init__(self, settings: Settings):
        self.url = settings.DATABASE_URL

        if settings.is_sqlite:
            engine_options = {
                "connect_args": {"check_same_thread": False},
            }
            # In-memory databases live only as long as their connection
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                engine_options["poolclass"] = StaticPool
        else:
            engine_options = {
                "connect_args": {"connect_timeout": settings.DB_CONNECT_TIMEOUT},
                "pool_pre_ping": True,
                "pool_recycle": 300,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
            }

        self.engine = create_engine(self.url, **engine_options)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def session(self):
        return self.SessionLocal()

    def wait_for_db(self, max_retries=30, delay=2):
        """Wait for database to be ready"""
        for attempt in range(max_retries):
            try:
                with self.engine.connect() as connection:
                    connection.execute(text("SELECT 1"))
                logger.info("Database is ready!")
                return True
            except Exception as e:
                logger.info(f"Database not ready (attempt {attempt + 1}/{max_retries}): {e}")
                if attempt < max_retries - 1:
                    time.sleep(delay)
                else:
                    logger.error("Database connection failed after all retries")
                    raise
        return False

    def create_tables(self):
        """Create all tables once the database accepts connections"""
        try:
            logger.info("Waiting for database to be ready...")
            self.wait_for_db()

            logger.info("Creating database tables...")
            Base.metadata.create_all(bind=self.engine)
            logger.info("Tables created successfully!")
            return True
        except Exception as e:
            logger.error(f"Error creating tables: {e}")
            raise

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
