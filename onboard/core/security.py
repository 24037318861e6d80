# File: onboard/core/security.py

"""
Security helpers for the Onboard API.

  - bcrypt password hashing / verification
  - HS256 bearer tokens carrying the user id and email
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from onboard.core.config import Settings
from onboard.core.errors import UnauthorizedError

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of a password, so longer ones are refused.
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class TokenIdentity:
    user_id: str
    email: str


def hash_password(password: str) -> str:
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(raw, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Compare a plaintext password against a stored bcrypt hash.

    A malformed hash, or a password too long to have been hashed, counts
    as a mismatch instead of an error.
    """
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    settings: Settings,
    *,
    user_id: str,
    email: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.jwt_expires_minutes))
    payload: dict[str, Any] = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.signing_secret, algorithm=settings.algorithm)


def decode_access_token(settings: Settings, token: str) -> TokenIdentity:
    """
    Verify signature and expiry, then return the identity the token carries.

    Raises:
        UnauthorizedError: bad signature, malformed token, expired, or
        missing claims. The message never says which.
    """
    try:
        payload = jwt.decode(
            token,
            settings.signing_secret,
            algorithms=[settings.algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as exc:
        raise UnauthorizedError("Invalid or expired token") from exc

    user_id = payload.get("sub")
    email = payload.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        raise UnauthorizedError("Invalid or expired token")
    return TokenIdentity(user_id=user_id, email=email)
