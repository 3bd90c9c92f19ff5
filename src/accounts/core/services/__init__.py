"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .user.user_management import UserManagementService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "UserManagementService",
]
