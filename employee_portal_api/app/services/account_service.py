"""
Service layer for the demo login check.

Credentials are matched by a linear scan over the seeded accounts; the
first account whose username and password both equal the submitted
values wins.  Comparison is strict: values that are not strings (a
number, ``null``, a list) never match, and no trimming or case folding
is applied.  There is no hashing, no token and no server‑side session.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import status

from employee_portal_api.app.core.errors import ApiError, INVALID_CREDENTIALS_MESSAGE
from employee_portal_api.app.core.seed import SeedData
from employee_portal_api.app.schemas.account import Account, LoginResponse


logger = logging.getLogger(__name__)


class AccountService:
    """Service class for the seeded accounts."""

    @staticmethod
    def find_account(seed: SeedData, username: Any, password: Any) -> Optional[Account]:
        """Return the first account matching both credentials, or ``None``."""
        if not isinstance(username, str) or not isinstance(password, str):
            return None
        for account in seed.accounts:
            if account.username == username and account.password == password:
                return account
        return None

    @classmethod
    def login(cls, seed: SeedData, username: Any, password: Any) -> LoginResponse:
        """Check credentials and build the login response.

        Raises
        ------
        ApiError
            With status 401 when no account matches.
        """
        account = cls.find_account(seed, username, password)
        if account is None:
            logger.warning("Failed login attempt for username %r", username)
            raise ApiError(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)
        logger.info("User %s logged in", account.username)
        return LoginResponse(message=f"歡迎 {account.name}！", user=account)
