"""
One-way password hashing.

Thin wrapper over Django's password hashers: the algorithm and its cost are
picked by settings.PASSWORD_HASHERS, the salt is generated per call. Any
failure of the primitive surfaces as HashingError (HTTP 500), never as a
validation error.
"""
import logging

from django.contrib.auth.hashers import check_password, identify_hasher, make_password

from apps.core.exceptions import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:

    def hash(self, password: str) -> str:
        if not isinstance(password, str):
            raise HashingError("Error hashing password")
        try:
            return make_password(password)
        except (ValueError, TypeError) as exc:
            logger.error("Password hashing failed: %s", exc)
            raise HashingError("Error hashing password") from exc

    def compare(self, password: str, hashed: str) -> bool:
        """True iff `password` matches the encoded hash `hashed`."""
        try:
            # check_password() quietly returns False for garbage hashes
            identify_hasher(hashed)
            return check_password(password, hashed)
        except (ValueError, TypeError) as exc:
            logger.error("Password comparison failed: %s", exc)
            raise HashingError("Error comparing passwords") from exc
