from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# settings read DATABASE_URL from the environment or .env
from notethread.config import get_settings
from notethread.core.models import BaseModel

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# importing the models package registers users, notes and comments
target_metadata = BaseModel.metadata


def _database_url() -> str:
    """Explicit sqlalchemy.url wins over the app settings."""
    return config.get_main_option("sqlalchemy.url") or get_settings().database_url


def do_run_migrations(connection: Connection) -> None:
    """Run migrations with a bound connection (sync)."""
    context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations(url: str) -> None:
    """Run migrations for an async engine."""
    connectable: AsyncEngine = create_async_engine(url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


def run_migrations_online() -> None:
    """Entry point used by alembic."""
    url = _database_url()

    # async drivers (asyncpg, aiosqlite)
    if "+asyncpg" in url or "+aiosqlite" in url:
        import asyncio

        asyncio.run(run_async_migrations(url))
        return

    connectable = engine_from_config(
        {"sqlalchemy.url": url},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        do_run_migrations(connection)


# entrypoint
if context.is_offline_mode():
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()
else:
    run_migrations_online()
