"""
Database base configuration following kkb_fastapi pattern.

Handles async engine URL construction and schema migrations.
"""
import asyncio
import contextlib
import functools
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy import text
from sqlalchemy.engine.url import URL
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.config import Config

DEFAULT_DRIVERNAME = "postgresql+asyncpg"

engine_kw = {
    "pool_pre_ping": True,
    # feature will normally emit SQL equivalent to "SELECT 1" each time a connection is checked out from the pool
    "pool_size": 2,  # number of connections to keep open at a time
    "max_overflow": 4,  # number of connections to allow to be opened above pool_size
    "pool_recycle": 3600,
    "pool_timeout": 30,
    "connect_args": {
        "prepared_statement_cache_size": 0,  # disable prepared statement cache
        "statement_cache_size": 0,  # disable statement cache
    },
}


def get_db_url(config: Config) -> URL:
    """
    Construct database URL from config.
    """
    config_db = dict(config.data["db"])
    drivername = config_db.pop("drivername", DEFAULT_DRIVERNAME)
    return URL.create(drivername=drivername, **config_db)


def get_engine_kw(async_db_url: URL) -> dict:
    """
    Engine keyword arguments for a database URL.

    Pool sizing and asyncpg cache settings only apply to PostgreSQL.
    """
    if async_db_url.drivername.startswith("postgresql"):
        return engine_kw
    return {}


async def create_database(config: Config) -> bool:
    """
    Ensures the PostgreSQL database specified in the config exists.
    Connects to the 'postgres' maintenance database to issue the CREATE DATABASE command.

    Returns:
        True if the database was newly created by this function.
        False if the database already existed.

    Raises:
        ValueError: If the database name is missing in the configuration.
    """

    logging.info("Creating database...")
    db_params = dict(config.data["db"])
    db_params.pop("drivername", None)
    target_database_name = db_params.pop("database", None)

    if not target_database_name:
        logging.error("Database name not found in configuration for creation.")
        raise ValueError("Database name missing in configuration for creation.")

    maintenance_url = URL.create(
        drivername=DEFAULT_DRIVERNAME, **{**db_params, "database": "postgres"}
    )
    maintenance_engine = create_async_engine(maintenance_url)
    try:
        async with maintenance_engine.connect() as connection:
            # CREATE DATABASE cannot run inside a transaction block
            autocommit_connection = await connection.execution_options(
                isolation_level="AUTOCOMMIT"
            )
            await autocommit_connection.execute(
                text(f'CREATE DATABASE "{target_database_name}"')
            )
        logging.info(f"Database '{target_database_name}' created successfully.")
        return True
    except DBAPIError as e:
        # PostgreSQL error code '42P04' is duplicate_database
        with contextlib.suppress(AttributeError):
            if getattr(e.orig, "pgcode", None) == "42P04" or "already exists" in str(e.orig):
                logging.warning(
                    f"Database '{target_database_name}' already exists. No action taken."
                )
                return False

        logging.error(
            f"A DBAPIError occurred while trying to create database '{target_database_name}': {e}"
        )
        raise
    finally:
        await maintenance_engine.dispose()


async def apply_db_migration(config: Config):
    """
    Apply Alembic migrations, creating the PostgreSQL database first if needed.

    Args:
        config: The application configuration containing database connection details.
    """
    async_url = get_db_url(config)
    if async_url.drivername.startswith("postgresql"):
        await create_database(config)

    alembic_cfg = alembic_config(str(Path.cwd() / "alembic.ini"))
    alembic_cfg.set_main_option(
        "script_location", str(Path.cwd() / "alembic_migrations")
    )

    # Alembic runs synchronously: swap the async driver for its sync counterpart
    sync_url = async_url.set(
        drivername=async_url.drivername.replace("+asyncpg", "").replace("+aiosqlite", "")
    )
    alembic_cfg.set_main_option(
        "sqlalchemy.url", sync_url.render_as_string(hide_password=False)
    )

    logging.info("Starting database migrations...")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(command.upgrade, alembic_cfg, "head")
    )
    logging.info("Database migration completed successfully")
