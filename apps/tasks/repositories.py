from typing import List, Optional

from apps.core.repository import Store
from .models import Task


class TaskStore(Store[Task]):
    """ORM-backed persistence for Task."""

    def get(self, pk: int) -> Optional[Task]:
        return Task.objects.filter(pk=pk).first()

    def list(self) -> List[Task]:
        return list(Task.objects.all())

    def save(self, task: Task) -> Task:
        task.save()
        return task

    def delete(self, task: Task) -> Task:
        pk = task.pk
        task.delete()
        task.pk = pk
        return task

    def list_by_owner(self, user_id: int) -> List[Task]:
        return list(Task.objects.filter(user_id=user_id))
