from loguru import logger
from sqlmodel import Session

from src.accounts.core.errors import ConflictError
from src.accounts.core.validation import validate_full_name
from src.accounts.entities.core.user.entity import User
from src.accounts.entities.core.user.repository import UserRepository


class UserManagementService:
    def __init__(self, db_session: Session):
        self._user_repo = UserRepository(db_session)
        self._db_session = db_session

    def validate_user_data(self, first_name: str | None, last_name: str | None) -> tuple[str, str]:
        """Validate both names and make sure the first name is still free.

        Returns:
            The validated (trimmed) first and last name.

        Raises:
            ValidationError: If either name has an invalid format.
            ConflictError: If a user with the same first name already exists.
        """
        first_name = validate_full_name(first_name)
        last_name = validate_full_name(last_name)

        existing_user = self._user_repo.get_by_first_name(first_name)
        if existing_user is not None:
            raise ConflictError(
                f'There is already a user registered with the "{first_name}" first name.'
            )

        return first_name, last_name

    def create_user(self, first_name: str | None, last_name: str | None) -> User:
        """Validate, check for duplicates, and persist a new user.

        The insert is committed in a single transaction; nothing is written
        when validation or the duplicate check fails.

        Returns:
            The persisted user, with its database id set.
        """
        first_name, last_name = self.validate_user_data(first_name, last_name)

        created_user = self._user_repo.create(
            User(first_name=first_name, last_name=last_name)
        )
        self._db_session.commit()

        logger.info("Created user {} ({})", created_user.id, created_user.full_name)
        return created_user
