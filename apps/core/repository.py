"""
Persistence interface for the stores.

Every store exposes the same four operations over a single model, plus its
own named queries (UserStore.find_by_email, TaskStore.list_by_owner).
Services depend on this interface, not on the ORM.
"""
from typing import Optional, Protocol, TypeVar, List

T = TypeVar('T')


class Store(Protocol[T]):
    def get(self, pk: int) -> Optional[T]:
        """Return the entity with this primary key, or None."""
        ...

    def list(self) -> List[T]:
        ...

    def save(self, entity: T) -> T:
        """Insert or update, returning the stored entity."""
        ...

    def delete(self, entity: T) -> T:
        """Delete permanently, returning the entity with its id still set."""
        ...
