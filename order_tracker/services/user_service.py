import asyncio
import logging
from typing import Optional

from order_tracker.config import Settings
from order_tracker.exceptions import InvalidCredentials, StoreFailure
from order_tracker.models.user import User

logger = logging.getLogger(__name__)


def row_to_user(row: list) -> Optional[User]:
    if len(row) < 3:
        return None
    return User(username=row[0], password=row[1], role=row[2])


class UserService:
    """Checks login credentials against the users sheet."""

    def __init__(self, sheets, settings: Settings):
        self.sheets = sheets
        self.users_range = settings.users_range

    async def verify_credentials(self, username: str, password: str) -> str:
        """Return the role of the first row matching username and password exactly."""
        try:
            rows = await asyncio.to_thread(self.sheets.get_values, self.users_range)
        except StoreFailure as e:
            logger.exception("Login failed: cannot read users sheet")
            raise StoreFailure("Error accessing spreadsheet. Check permissions.") from e

        for row in rows:
            user = row_to_user(row)
            if user and user.username == username and user.password == password:
                logger.info("Login succeeded for %s (%s)", username, user.role)
                return user.role

        logger.info("Login rejected for %s", username)
        raise InvalidCredentials()
