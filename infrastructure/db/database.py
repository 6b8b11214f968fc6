"""
Database configuration and session management for async SQLAlchemy.

The engine is created once per process; init_db pings it at startup and
close_db disposes the pool on shutdown.
"""
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# Import all models to ensure they're registered in the same registry
# This must happen before creating the engine
from infrastructure.db.models import Base, UserModel, TransactionModel  # noqa: F401
from infrastructure.logging.structlog_logs import logger
from domain.config import get_database_config

db_config = get_database_config()

# Create async engine
engine = create_async_engine(
    db_config.url,
    echo=db_config.echo,
    future=True,
    pool_pre_ping=True,
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def init_db() -> None:
    """Check connectivity once at startup. Raises if the database is unreachable."""
    logger.info("db_connecting", url=db_config.safe_url)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("db_connection_failed", url=db_config.safe_url, error=str(e))
        raise
    logger.info("db_connected", url=db_config.safe_url)


async def create_tables() -> None:
    """Create the bank_app tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose the connection pool on shutdown."""
    logger.info("db_closing")
    await engine.dispose()


async def get_db_session() -> AsyncSession:
    """
    Dependency function to get database session.
    Use this in FastAPI route dependencies.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
