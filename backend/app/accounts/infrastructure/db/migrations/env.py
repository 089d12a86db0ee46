"""Alembic migration environment for the accounts schema.

The database URL is taken from the Alembic config's sqlalchemy.url when
one is set (e.g. by a test harness), otherwise from application settings.
"""

from alembic import context
from sqlalchemy import engine_from_config, pool

from app.accounts.infrastructure.db.models import Base
from app.core.config import get_settings
from app.core.logging import get_logger, setup_logging

config = context.config

if config.config_file_name is not None:
    setup_logging(level=get_settings().log_level)

logger = get_logger("alembic.env")

target_metadata = Base.metadata


def _get_database_url() -> str:
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    logger.info("Using DATABASE_URL from settings")
    return str(get_settings().database_url)


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting to a database."""
    context.configure(
        url=_get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live database connection."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = _get_database_url()
    connectable = engine_from_config(
        section,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
