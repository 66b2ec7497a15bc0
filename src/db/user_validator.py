"""
Database checks against the `users` table.
The validator borrows a caller-owned connection and issues one read-only query per call.
Driver errors are not caught here; a closed or broken connection raises instead of reporting absence.
"""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection

LOGGER = logging.getLogger("db")

USER_EXISTS_QUERY = text("SELECT COUNT(*) FROM users WHERE email = :email")


class UserDbValidator:
    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    def user_exists(self, email: str) -> bool:
        """Return True when at least one row in `users` has exactly this email."""

        count = self.connection.execute(USER_EXISTS_QUERY, {"email": email}).scalar_one()
        LOGGER.debug("user existence check matched_rows=%s", count)
        return int(count) > 0
