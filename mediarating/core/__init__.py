# mediarating/core/__init__.py

from .config import get_settings, Settings
from .auth import (
    get_password_hash,
    verify_password,
    strip_bearer,
    owns,
    utc_now,
)
from .exceptions import (
    ServiceError,
    ValidationError,
    UnauthorizedError,
    InvalidCredentialsError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "get_settings",
    "Settings",
    "get_password_hash",
    "verify_password",
    "strip_bearer",
    "owns",
    "utc_now",
    "ServiceError",
    "ValidationError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
