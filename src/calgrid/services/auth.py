from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

import jwt

from ..domain import UserRecord
from .context import ServiceContext

logger = logging.getLogger(__name__)

_SCRYPT_N = 2**14
_SCRYPT_R = 8
_SCRYPT_P = 1


class AuthError(RuntimeError):
    """Base class for sign-up, sign-in and token failures."""


class AuthNotConfiguredError(AuthError):
    """Raised when no token secret is configured."""


class UsernameTakenError(AuthError):
    pass


class InvalidCredentialsError(AuthError):
    pass


class InvalidTokenError(AuthError):
    pass


def hash_password(password: str, *, salt: bytes | None = None) -> str:
    salt = salt or secrets.token_bytes(16)
    digest = hashlib.scrypt(password.encode("utf-8"), salt=salt, n=_SCRYPT_N, r=_SCRYPT_R, p=_SCRYPT_P)
    return f"scrypt${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        scheme, salt_hex, digest_hex = stored.split("$")
    except ValueError:
        return False
    if scheme != "scrypt":
        return False
    candidate = hash_password(password, salt=bytes.fromhex(salt_hex))
    return hmac.compare_digest(candidate.split("$")[2], digest_hex)


@dataclass(slots=True)
class AuthService:
    context: ServiceContext

    def _secret(self) -> str:
        auth = self.context.settings.auth
        if not auth.is_configured:
            raise AuthNotConfiguredError(f"Missing environment variables: {', '.join(auth.missing_env_vars)}")
        return auth.token_secret

    def sign_up(self, username: str, password: str) -> UserRecord:
        user = UserRecord(
            id=uuid4().hex,
            username=username,
            password_hash=hash_password(password),
            created_at=datetime.now(timezone.utc),
        )
        saved = self.context.users.insert(user)
        if saved is None:
            raise UsernameTakenError(f"Username {username!r} is already registered.")
        logger.info("Registered user %s", saved.id)
        return saved

    def sign_in(self, username: str, password: str) -> str:
        user = self.context.users.fetch_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected sign-in for %r", username)
            raise InvalidCredentialsError("invalid username or password")
        return self.issue_token(user.id)

    def issue_token(self, user_id: str) -> str:
        algorithm = self.context.settings.auth.algorithm
        return jwt.encode({"id": user_id}, self._secret(), algorithm=algorithm)

    def identity_from_token(self, token: str) -> str:
        algorithm = self.context.settings.auth.algorithm
        try:
            claims = jwt.decode(token, self._secret(), algorithms=[algorithm])
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("token could not be decoded") from exc
        identity = claims.get("id")
        if not identity:
            raise InvalidTokenError("token carries no identity")
        return str(identity)
