"""User database table model."""

from sqlmodel import Field

from src.accounts.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Mirrors the ``users`` table created by the initial migration.
    """

    __tablename__ = "users"

    first_name: str = Field(max_length=255, nullable=False)
    last_name: str = Field(max_length=255, nullable=False)
