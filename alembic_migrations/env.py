"""
Alembic environment.

The database URL is set by app.database.base.apply_db_migration, or falls
back to the configuration selected by the ENVIRONMENT env var.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from app.core.config import get_config, get_config_file_for_environment
from app.database import Base
from app.database.base import get_db_url
from app.database.schemas import ActivityDBModel  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

if not config.get_main_option("sqlalchemy.url"):
    async_url = get_db_url(get_config(get_config_file_for_environment()))
    sync_url = async_url.set(
        drivername=async_url.drivername.replace("+asyncpg", "").replace("+aiosqlite", "")
    )
    config.set_main_option("sqlalchemy.url", sync_url.render_as_string(hide_password=False))


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
