"""Password hashing, JWT access tokens and opaque refresh tokens."""
import hashlib
import secrets
from datetime import timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from mindease.core.config import get_settings, parse_expires_in
from mindease.core.errors import UnauthorizedError
from mindease.core.time import utcnow

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a hash.

    Passwords bcrypt refuses to handle (over 72 bytes) simply don't match.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: str, email: str, extra: dict[str, Any] | None = None) -> str:
    settings = get_settings()
    expire = utcnow() + timedelta(seconds=parse_expires_in(settings.access_token_expires_in))
    to_encode = {
        "sub": str(user_id),
        "userId": str(user_id),
        "email": email,
        "exp": int(expire.timestamp()),
        "type": "access",
    }
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """Return the token payload or raise UnauthorizedError."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except JWTError:
        raise UnauthorizedError("Unauthorized")
    if payload.get("type") != "access" or not payload.get("userId"):
        raise UnauthorizedError("Unauthorized")
    return payload


# Refresh tokens are random hex strings; only their sha256 is stored
def generate_refresh_token() -> str:
    return secrets.token_hex(64)


def hash_refresh_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
