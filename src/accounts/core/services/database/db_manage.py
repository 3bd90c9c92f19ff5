"""Schema management: Alembic migrations and metadata table creation."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from loguru import logger
from sqlmodel import SQLModel, create_engine

from src.accounts.runtime.config.config_data import ConfigData
from src.accounts.runtime.context import get_config

MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


class DbManageService:
    def __init__(self, config: ConfigData | None = None):
        self._config = config or get_config()

    @property
    def database_url(self) -> str:
        return self._config.database.url

    def alembic_config(self) -> Config:
        """Build an Alembic config pointing at the bundled migrations."""
        sqlite_path = self._config.database.sqlite_path
        if sqlite_path:
            sqlite_path.parent.mkdir(parents=True, exist_ok=True)

        alembic_cfg = Config()
        alembic_cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
        # ConfigParser interpolation treats '%' specially
        alembic_cfg.set_main_option("sqlalchemy.url", self.database_url.replace("%", "%%"))
        return alembic_cfg

    def upgrade(self, revision: str = "head") -> None:
        """Apply migrations up to ``revision``."""
        logger.info("Upgrading database schema to {}", revision)
        command.upgrade(self.alembic_config(), revision)

    def downgrade(self, revision: str = "-1") -> None:
        """Revert migrations down to ``revision``."""
        logger.info("Downgrading database schema to {}", revision)
        command.downgrade(self.alembic_config(), revision)

    def current(self) -> str | None:
        """Return the revision the database is at, or None if unversioned."""
        sqlite_path = self._config.database.sqlite_path
        if sqlite_path:
            sqlite_path.parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(self.database_url)
        try:
            with engine.connect() as connection:
                return MigrationContext.configure(connection).get_current_revision()
        finally:
            engine.dispose()

    def create_all(self) -> None:
        """Create all tables straight from the model metadata, bypassing Alembic."""
        from src.accounts.entities.core.user import UserTable  # noqa: F401

        engine = create_engine(self.database_url)
        try:
            SQLModel.metadata.create_all(engine)
        finally:
            engine.dispose()
        logger.info("Database initialized with tables.")
