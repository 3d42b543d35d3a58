"""
Business logic for users.

Registration stores a PBKDF2 password hash and rejects emails that are
already registered, ignoring case.  Authentication returns the public
user record; token issuance is left to the HTTP layer.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from ..core.errors import AuthError, ConflictError, ValidationError
from ..core.security import hash_password, verify_password
from ..schemas.user import DEFAULT_ROLE, UserCreate, UserInDB, UserLogin, UserRead
from ..stores.base import UserStore


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class UserService:
    """Registration and login on top of a ``UserStore``."""

    def __init__(self, users: UserStore) -> None:
        self.users = users

    async def register(self, data: UserCreate) -> UserRead:
        """Create a new user.

        Email, password and name are required.  A duplicate email
        raises ``ConflictError`` (from the existence check here, or from
        the store if two registrations race) and leaves the store
        unchanged.
        """
        logger = logging.getLogger(__name__)
        email = _clean(data.email)
        name = _clean(data.name)
        if not email or not data.password or not name:
            raise ValidationError("Missing required fields")

        if self.users.get_by_email(email) is not None:
            raise ConflictError("User already exists")

        user = UserInDB(
            id=f"user_{uuid.uuid4().hex}",
            email=email,
            name=name,
            role=_clean(data.role) or DEFAULT_ROLE,
            password_hash=hash_password(data.password),
            created_at=datetime.now(timezone.utc),
        )
        self.users.add(user)
        logger.info("Registered user %s (%s)", user.id, user.email)
        return user.public()

    async def authenticate(self, data: UserLogin) -> UserRead:
        """Return the user matching the credentials or raise ``AuthError``."""
        logger = logging.getLogger(__name__)
        email = _clean(data.email)
        if not email or not data.password:
            raise ValidationError("Email and password required")

        user = self.users.get_by_email(email)
        if user is None or not verify_password(data.password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise AuthError("Invalid credentials", status_code=401)
        return user.public()
