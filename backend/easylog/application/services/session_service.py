"""Application service for the mock session — login, logout, and access gating."""

import json
import logging
import time
from collections.abc import Callable

from easylog.application.interfaces import KeyValueStorage
from easylog.domain.entities import LoginResult, User
from easylog.domain.exceptions import (
    CorruptStateError,
    NotAuthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

USER_KEY = "user"
TOKEN_KEY = "token"
TOKEN_PREFIX = "dummy-jwt-token-"


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class SessionService:
    """Gates journal access on the stored session.

    Presence of a token plus a readable user record is the only
    authentication signal; tokens never expire and are not verified.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Callable[[], int] | None = None,
    ):
        self._storage = storage
        self._clock = clock or _epoch_millis

    async def login(self, email: str | None, password: str | None) -> LoginResult:
        """Accept any non-empty credentials and persist the fabricated session."""
        if not email or not password:
            raise ValidationError("E-Mail und Passwort sind erforderlich")

        user = User.from_email(email)
        token = f"{TOKEN_PREFIX}{self._clock()}"
        await self._storage.set(USER_KEY, json.dumps(user.to_dict(), ensure_ascii=False))
        await self._storage.set(TOKEN_KEY, token)
        logger.info("Mock login for '%s' (role=%s)", user.email, user.role)
        return LoginResult(user=user, token=token)

    async def logout(self) -> None:
        await self._storage.remove(TOKEN_KEY)
        await self._storage.remove(USER_KEY)

    async def has_token(self) -> bool:
        return bool(await self._storage.get(TOKEN_KEY))

    async def is_authenticated(self) -> bool:
        return await self.current_user() is not None

    async def current_user(self) -> User | None:
        """Return the stored user, or None without touching a broken session."""
        raw_user = await self._storage.get(USER_KEY)
        if not raw_user or not await self.has_token():
            return None
        try:
            return User.from_dict(json.loads(raw_user))
        except ValueError:
            return None

    async def require_user(self) -> User:
        """Return the acting user or fail.

        A stored user that cannot be parsed ends the session: both keys are
        cleared before ``CorruptStateError`` is raised.
        """
        raw_user = await self._storage.get(USER_KEY)
        if not raw_user or not await self.has_token():
            raise NotAuthenticatedError()
        try:
            return User.from_dict(json.loads(raw_user))
        except ValueError as exc:
            logger.warning("Clearing session with unreadable user record: %s", exc)
            await self.logout()
            raise CorruptStateError(USER_KEY, str(exc)) from exc
