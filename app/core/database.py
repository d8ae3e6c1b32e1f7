from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine_options(url: str) -> dict:
    """
    Engine keyword arguments for the given database URL.

    SQLite does not accept the server pool/timeout settings; an in-memory
    SQLite database must share one connection or every session sees an
    empty database.
    """
    if url.startswith("sqlite"):
        options = {
            "echo": settings.DB_ECHO_SQL,
            "connect_args": {"check_same_thread": False},
        }
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,  # Number of connections to keep open
        "max_overflow": settings.DB_MAX_OVERFLOW,  # Max connections beyond pool_size
        "pool_timeout": settings.DB_POOL_TIMEOUT,  # Seconds to wait for connection
        "pool_recycle": settings.DB_POOL_RECYCLE,  # Recycle connections after N seconds

        # Test connection before using (detect disconnects)
        "pool_pre_ping": True,

        "echo": settings.DB_ECHO_SQL,

        "connect_args": {
            "connect_timeout": 10,  # Connection timeout in seconds
        },
    }


engine = create_engine(settings.DATABASE_URL, **build_engine_options(settings.DATABASE_URL))


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,  # Don't auto-commit transactions
    autoflush=False,   # Don't auto-flush before queries
    bind=engine,
    expire_on_commit=False  # Don't expire objects after commit
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(bind=None):
    """
    Create all database tables defined in models.

    Only meant for development and tests; production uses Alembic migrations.
    """
    # Models must be imported so they register on Base.metadata
    from app.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created")


def drop_database_tables(bind=None):
    """
    Drop all database tables.

    This deletes all data. Only use in development/testing.
    """
    from app.models import student  # noqa: F401

    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("Database tables dropped")


def check_database_connection(bind=None) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    if settings.DEBUG:
        logger.debug("New database connection established")


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        raise RuntimeError("Cannot connect to database!")

    if settings.DB_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized")


if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    if check_database_connection():
        print("Connection successful!")
    else:
        print("Connection failed!")
