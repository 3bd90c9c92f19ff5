"""User domain entity."""

from typing import Any

from pydantic import Field

from src.accounts.entities.core._base import Entity


class User(Entity):
    """User entity representing a person registered in the accounts database.

    The first name is unique among all users; that rule is enforced by
    ``UserManagementService`` before the insert, not by the table.
    """

    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.first_name,
            self.last_name,
        ))
