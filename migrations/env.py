import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, make_url, pool

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
import nurse_connect.models  # noqa: E402,F401  registers every table on Base.metadata
from nurse_connect.core.config import settings  # noqa: E402
from nurse_connect.models.base import Base  # noqa: E402

# async drivers used by the app -> sync drivers alembic can run with
SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def sync_database_url(database_url: str) -> str:
    url = make_url(database_url)
    url = url.set(drivername=SYNC_DRIVERS.get(url.drivername, url.drivername))
    return url.render_as_string(hide_password=False)


if not config.get_main_option("sqlalchemy.url"):
    # configparser treats % as interpolation
    config.set_main_option("sqlalchemy.url", sync_database_url(settings.DATABASE_URL).replace("%", "%%"))


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting"""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    if settings.ENVIRONMENT.lower() == "production" and "downgrade" in sys.argv:
        raise RuntimeError("Downgrades are blocked in production")

    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
