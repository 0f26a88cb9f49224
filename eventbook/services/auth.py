"""Password hashing, bearer tokens and user accounts."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from eventbook.domain.models import User
from eventbook.domain.results import RegistrationOutcome, StoreStatus
from eventbook.repos.base import UserStore

logger = logging.getLogger(__name__)

DEFAULT_EXPIRE_MINUTES = 6 * 60


class InvalidAuthorizationHeader(Exception):
    pass


class InvalidTokenError(Exception):
    pass


class PasswordHasher:
    def __init__(self, schemes: list[str] | None = None) -> None:
        self._context = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        return self._context.verify(password, password_hash)


class TokenIssuer:
    """Signs and verifies HS256 tokens whose subject is a user id."""

    def __init__(
        self,
        secret: str,
        expires_minutes: int = DEFAULT_EXPIRE_MINUTES,
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self.expires_minutes = expires_minutes
        self.algorithm = algorithm

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(minutes=self.expires_minutes)).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Return the user id carried by *token*.

        Raises:
            InvalidTokenError: bad signature, expired, or no subject.
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc
        user_id = claims.get("sub")
        if not user_id:
            raise InvalidTokenError("Token has no subject")
        return user_id


def parse_bearer(header: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not header:
        raise InvalidAuthorizationHeader("No header.")
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise InvalidAuthorizationHeader("Malformed authorization header.")
    return parts[1]


class AccountService:
    """Registration and login on top of a UserStore."""

    def __init__(self, users: UserStore, hasher: PasswordHasher, tokens: TokenIssuer) -> None:
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(self, username: str, password: str) -> RegistrationOutcome:
        user = User(username=username, password_hash=self.hasher.hash(password))
        if self.users.add(user) is StoreStatus.DUPLICATE:
            logger.info("Username %r already registered", username)
            return RegistrationOutcome.DUPLICATE
        logger.info("Registered user %s", user.id)
        return RegistrationOutcome.CREATED

    def login(self, username: str, password: str) -> str | None:
        """Return a token, or None when the username or password is wrong."""
        user = self.users.get_by_username(username)
        if user is None or not self.hasher.verify(password, user.password_hash):
            return None
        return self.tokens.issue(user.id)

    def authenticate(self, authorization: str | None) -> str:
        """Return the user id for a bearer header, raising on a bad header or token."""
        return self.tokens.verify(parse_bearer(authorization))
