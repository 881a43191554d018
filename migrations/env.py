"""
Alembic entry point for the ledger schema.

The target database is always the one named by the application's
DATABASE_URL; the url in alembic.ini is only a placeholder.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool

from bookkeeper.config import get_settings
from bookkeeper.models import Base
from bookkeeper.models.base import make_engine

config = context.config
settings = get_settings()

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

# Options shared by offline and online runs. SQLite cannot ALTER
# constraints in place, so its migrations are rendered as batches.
migration_options = {
    "target_metadata": Base.metadata,
    "compare_type": True,
    "render_as_batch": settings.is_sqlite,
}


def run_migrations_offline() -> None:
    """Write the migration SQL to stdout."""
    context.configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **migration_options,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations to the ledger database."""
    engine = make_engine(settings.DATABASE_URL, poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, **migration_options)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
