from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a database-generated integer identifier."""

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the database on insert",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-incremented integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identifier assigned by the database on insert",
    )
