from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from translink.config import settings
import logging

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

# Environment-based configurations
if settings.environment == "production":
    engine = create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_recycle=1800,
    )
else:
    engine = create_engine(
        settings.database_url,
        echo=settings.debug,  # Enable query logging in debug mode
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create all translink tables on the given engine (defaults to the configured one)."""
    # Register models on Base.metadata before create_all
    import translink.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured.")
