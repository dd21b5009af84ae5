# mediarating/core/auth.py

from datetime import datetime, timezone
from typing import Optional
from passlib.context import CryptContext

# unsalted SHA-256 hex digest: the same password always yields the same hash
pwd_context = CryptContext(schemes=["hex_sha256"])

BEARER_PREFIX = "Bearer "


def get_password_hash(password: str) -> str:
    """SHA-256 hex digest of the password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Password check against a stored digest"""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def strip_bearer(value: Optional[str]) -> Optional[str]:
    """Token part of an Authorization value; the prefix is optional.

    Only the prefix is removed. Tokens start with the username, so the rest is
    compared as given.
    """
    if value is None:
        return None
    if value.startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):]
    return value or None


def owns(actor_id: int, resource_owner_id: Optional[int]) -> bool:
    """Ownership predicate shared by every resource type"""
    return resource_owner_id is not None and actor_id == resource_owner_id


def utc_now() -> datetime:
    # naive UTC, matching how DateTime columns are stored
    return datetime.now(timezone.utc).replace(tzinfo=None)
