"""Alembic environment for the accounts database."""

from alembic import context
from sqlmodel import SQLModel

from src.accounts.entities.core.user import UserTable  # noqa: F401
from src.accounts.runtime.context import get_config

config = context.config

target_metadata = SQLModel.metadata


def get_url() -> str:
    """Prefer a URL set on the Alembic config, else use the application config."""
    return config.get_main_option("sqlalchemy.url") or get_config().database.url


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a live connection."""
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    from sqlalchemy import create_engine, pool

    url = get_url()
    connectable = create_engine(url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
