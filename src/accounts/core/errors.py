"""Domain errors raised by the account services."""


class AccountsError(Exception):
    """Base class for errors that are reported to the user as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AccountsError):
    """A value does not have the expected format."""


class ConflictError(AccountsError):
    """The operation would break a uniqueness rule."""
