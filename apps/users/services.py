"""
Services for the Users app.

This is the public API other apps use to look users up (see TaskService).
"""
import logging
from typing import List

from django.db import IntegrityError

from apps.core.exceptions import Conflict, NotFound, Unauthorized
from .dtos import UserCreate
from .hashing import PasswordHasher
from .models import User
from .repositories import UserStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:

    def __init__(self, store: UserStore, hasher: PasswordHasher):
        self.store = store
        self.hasher = hasher

    def create(self, payload: UserCreate) -> User:
        if self.store.email_taken(payload.email):
            raise Conflict(f"User with email {payload.email} already exists")

        user = User(
            email=payload.email,
            password=self.hasher.hash(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        user = self._save(user)
        logger.info("Created user %s", user.id)
        return user

    def find_all(self) -> List[User]:
        return self.store.list()

    def find_one(self, user_id: int) -> User:
        user = self.store.get(user_id)
        if user is None:
            raise NotFound(f"User #{user_id} not found")
        return user

    def update(self, user_id: int, data: dict) -> User:
        """
        Apply a partial update. Only keys present in `data` are touched;
        a new password is hashed before it is stored.
        """
        user = self.find_one(user_id)

        changes = {key: value for key, value in data.items() if value is not None}
        if 'email' in changes and self.store.email_taken(changes['email'], exclude_pk=user.pk):
            raise Conflict(f"User with email {changes['email']} already exists")
        if 'password' in changes:
            changes['password'] = self.hasher.hash(changes['password'])

        for key, value in changes.items():
            setattr(user, key, value)

        return self._save(user)

    def _save(self, user: User) -> User:
        # The unique index still decides when two requests race for one email
        try:
            return self.store.save(user)
        except IntegrityError:
            raise Conflict(f"User with email {user.email} already exists") from None

    def remove(self, user_id: int) -> User:
        user = self.store.delete(self.find_one(user_id))
        logger.info("Deleted user %s", user_id)
        return user

    def find_by_email(self, email: str) -> User:
        user = self.store.find_by_email(email)
        if user is None:
            raise NotFound(f"User with email {email} not found")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user owning these credentials, or raise Unauthorized."""
        try:
            user = self.find_by_email(email)
        except NotFound:
            raise Unauthorized(INVALID_CREDENTIALS) from None

        if not self.hasher.compare(password, user.password):
            logger.warning("Failed login for user %s", user.id)
            raise Unauthorized(INVALID_CREDENTIALS)
        return user
