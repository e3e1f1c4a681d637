"""Security primitives — clock, password digest and reset-token source."""

import base64
import hashlib
import hmac
import secrets
from datetime import datetime, timezone

from app.config import get_settings

RESET_TOKEN_BYTES = 32


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the form stored in the database)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def hash_password(password: str) -> str:
    """Deterministic digest of password + the application-wide salt, base64 encoded."""
    salted = password + get_settings().PASSWORD_SALT
    digest = hashlib.sha256(salted.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return hmac.compare_digest(hash_password(plain_password), hashed_password)


def generate_reset_token() -> str:
    """32 random bytes, URL-safe base64 so the token can travel in a link."""
    return secrets.token_urlsafe(RESET_TOKEN_BYTES)
