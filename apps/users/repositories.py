from typing import List, Optional

from django.db import transaction

from apps.core.repository import Store
from .models import User


class UserStore(Store[User]):
    """ORM-backed persistence for User."""

    def get(self, pk: int) -> Optional[User]:
        return User.objects.filter(pk=pk).first()

    def list(self) -> List[User]:
        return list(User.objects.all())

    def save(self, user: User) -> User:
        # Savepoint so a unique-index violation leaves the outer transaction usable
        with transaction.atomic():
            user.save()
        return user

    def delete(self, user: User) -> User:
        pk = user.pk
        user.delete()
        # Django clears the pk on delete; callers get the last-known state
        user.pk = pk
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        return User.objects.filter(email=email).first()

    def email_taken(self, email: str, exclude_pk: Optional[int] = None) -> bool:
        queryset = User.objects.filter(email=email)
        if exclude_pk is not None:
            queryset = queryset.exclude(pk=exclude_pk)
        return queryset.exists()
