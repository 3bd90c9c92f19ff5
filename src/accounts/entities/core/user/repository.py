"""User repository."""

from loguru import logger
from sqlmodel import Session, select

from src.accounts.entities.core.user.entity import User
from src.accounts.entities.core.user.table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_first_name(self, first_name: str) -> User | None:
        statement = select(UserTable).where(UserTable.first_name == first_name)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.id)
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def create(self, user: User) -> User:
        """Add the user and flush so the database assigns its id.

        The caller owns the transaction and commits it.
        """
        row = UserTable(first_name=user.first_name, last_name=user.last_name)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        logger.debug("Inserted user row {}", row.id)
        return User.model_validate(row, from_attributes=True)
