"""
app/services/identity_store.py

Purpose: User identity & profile store

- Registration, login and forgot-password checks
- Token resolution (token-<id> -> User)
- Profile updates, including re-keying a user under a new email
- Id generation (millisecond timestamps, never reused)

One store object lives for the whole process and is handed to request
handlers through app.state (see app/api/dependencies.py).
"""

import asyncio
import time
from datetime import datetime, timezone
from typing import Callable, Dict, Any, Optional, Tuple

from app.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.logging import get_logger, LogContext
from app.db.user_backends import UserBackend
from app.models.user import User, PROFILE_FIELDS
from app.services.token_service import issue_token, parse_token
from utils.constants import (
    MSG_EMAIL_AND_PASSWORD_REQUIRED,
    MSG_EMAIL_IN_USE,
    MSG_EMAIL_REQUIRED,
    MSG_INVALID_CREDENTIALS,
    MSG_NO_TOKEN,
    MSG_PASSWORD_RESET_SENT,
    MSG_PASSWORD_TOO_SHORT,
    MSG_USER_EXISTS,
    MSG_USER_NOT_FOUND,
)
from utils.validation_utils import email_local_part

logger = get_logger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdentityStore:
    """
    Owns the email -> User mapping through a backend.

    register and update_profile run under one asyncio.Lock, so a
    uniqueness check and the write that depends on it can never be
    interleaved with another mutation. Reads do not take the lock.
    """

    def __init__(
        self,
        backend: UserBackend,
        min_password_length: int = 6,
        clock: Callable[[], int] = _now_ms,
    ):
        self.backend = backend
        self.min_password_length = min_password_length
        self._clock = clock
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def _next_id(self) -> str:
        """
        Time-derived id. Two registrations in the same millisecond get
        consecutive values instead of the same one.
        """
        candidate = max(self._clock(), self._last_id + 1)
        while await self.backend.find_by_id(str(candidate)) is not None:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    async def register(self, email: Optional[str], password: Optional[str], name: Optional[str] = None) -> Tuple[User, str]:
        """
        Creates a user.

        Returns:
            (user, token)

        Raises:
            ValidationError: Missing email/password or short password
            ConflictError: Email already registered
        """
        if not email or not password:
            raise ValidationError(MSG_EMAIL_AND_PASSWORD_REQUIRED)

        if len(password) < self.min_password_length:
            raise ValidationError(MSG_PASSWORD_TOO_SHORT.format(length=self.min_password_length))

        async with self._lock:
            if await self.backend.get(email) is not None:
                raise ConflictError(MSG_USER_EXISTS)

            user = User(
                id=await self._next_id(),
                email=email,
                password=password,
                name=name or email_local_part(email),
            )
            await self.backend.insert(user)

        with LogContext(user_id=user.id, email=email):
            logger.info("User registered")

        return user, issue_token(user.id)

    async def login(self, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """
        Checks credentials. Unknown email and wrong password raise the
        same AuthError.
        """
        if not email or not password:
            raise ValidationError(MSG_EMAIL_AND_PASSWORD_REQUIRED)

        user = await self.backend.get(email)
        if user is None or user.password != password:
            logger.info("Rejected login", extra={"email": email})
            raise AuthError(MSG_INVALID_CREDENTIALS)

        return user, issue_token(user.id)

    async def resolve_token(self, token: Optional[str]) -> User:
        """
        Finds the user a token was issued for.

        Raises:
            AuthError: No token at all
            NotFoundError: Malformed token or no user with that id
        """
        if not token:
            raise AuthError(MSG_NO_TOKEN)

        user_id = parse_token(token)
        if user_id is None:
            raise NotFoundError(MSG_USER_NOT_FOUND)

        user = await self.backend.find_by_id(user_id)
        if user is None:
            raise NotFoundError(MSG_USER_NOT_FOUND)
        return user

    async def get_profile(self, token: Optional[str]) -> User:
        return await self.resolve_token(token)

    async def update_profile(self, token: Optional[str], fields: Dict[str, Any]) -> User:
        """
        Applies the fields present in `fields` to the token's user.

        `name` is only applied when truthy. Profile fields are applied
        whenever their key is present, even with "" or None. A new,
        different `email` re-keys the record and keeps its id; if that
        email belongs to someone else nothing is written.

        Raises:
            AuthError, NotFoundError: Token problems (see resolve_token)
            ConflictError: New email already in use
        """
        async with self._lock:
            user = await self.resolve_token(token)
            current_email = user.email
            updated = user.model_copy()

            if fields.get("name"):
                updated.name = fields["name"]

            for field in PROFILE_FIELDS:
                if field in fields:
                    setattr(updated, field, fields[field])

            updated.updated_at = datetime.now(timezone.utc)

            new_email = fields.get("email")
            if new_email and new_email != current_email:
                if await self.backend.get(new_email) is not None:
                    raise ConflictError(MSG_EMAIL_IN_USE)
                updated.email = new_email
                await self.backend.rename(current_email, updated)
                logger.info(
                    "User re-keyed to new email",
                    extra={"user_id": user.id, "email": new_email}
                )
            else:
                await self.backend.replace(updated)

        logger.info("Profile updated", extra={"user_id": updated.id})
        return updated

    async def forgot_password(self, email: Optional[str]) -> str:
        """
        Existence check only; no reset token or email is produced.
        """
        if not email:
            raise ValidationError(MSG_EMAIL_REQUIRED)

        if await self.backend.get(email) is None:
            raise NotFoundError(MSG_USER_NOT_FOUND)

        return MSG_PASSWORD_RESET_SENT
