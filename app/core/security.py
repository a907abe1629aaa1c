"""Salted password hashing and JWT creation/verification for authentication."""

import hashlib
import hmac
import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from app.core.config import settings as default_settings

if TYPE_CHECKING:
    from app.core.config import Settings

# Salt length in bytes for the sha256 scheme (hex-encoded, so twice as many characters).
DEFAULT_SALT_LENGTH = 32

# bcrypt salts are self-describing; anything else is a hex salt for the sha256 scheme.
BCRYPT_SALT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    """Return `length` random bytes from the OS CSPRNG, hex-encoded."""
    return secrets.token_hex(length)


def generate_bcrypt_salt(rounds: int) -> str:
    """Return a bcrypt salt string ("$2b$<rounds>$...") for the hardened scheme."""
    return bcrypt.gensalt(rounds=rounds).decode("utf-8")


def generate_hash(password: str, salt: str) -> str:
    """
    Deterministic salted hash of `password`.

    With a bcrypt salt the result is bcrypt.hashpw(password, salt); otherwise
    it is the SHA-256 hex digest of password + salt (single pass, kept so that
    credentials written by earlier deployments still verify).
    """
    if salt.startswith(BCRYPT_SALT_PREFIXES):
        # bcrypt has a 72-byte limit; truncate to avoid errors.
        pw_bytes = password.encode("utf-8")[:72]
        return bcrypt.hashpw(pw_bytes, salt.encode("utf-8")).decode("utf-8")
    return hashlib.sha256((password + salt).encode("utf-8")).hexdigest()


def new_credential(password: str, settings: "Settings | None" = None) -> tuple[str, str]:
    """Create a (salt, salted_hash) pair using the configured scheme."""
    settings = settings or default_settings
    if settings.PASSWORD_HASH_SCHEME == "bcrypt":
        salt = generate_bcrypt_salt(settings.BCRYPT_ROUNDS)
    else:
        salt = generate_salt(settings.SALT_LENGTH)
    return salt, generate_hash(password, salt)


def verify_password(plain_password: str, salt: str, stored_hash: str) -> bool:
    """Re-derive the hash from the stored salt and compare in constant time."""
    try:
        candidate = generate_hash(plain_password, salt)
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), stored_hash.encode("utf-8"))


def create_access_token(claims: dict[str, Any], settings: "Settings | None" = None) -> str:
    """Sign `claims` (e.g. role, id) into a JWT with iat and exp added."""
    settings = settings or default_settings
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        **claims,
        "iat": now,
        "exp": now + timedelta(days=settings.JWT_EXPIRE_DAYS),
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings | None" = None) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (role, id, exp, iat and optionally name).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    settings = settings or default_settings
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
    )
