"""
Services for the Tasks app.

Every operation is scoped to an owner id; a task is only visible to, and
removable by, the user it belongs to.
"""
import logging
from typing import List

from apps.core.exceptions import Forbidden, NotFound
from apps.users.services import UserService
from .dtos import TaskIn
from .models import Task
from .repositories import TaskStore

logger = logging.getLogger(__name__)


class TaskService:

    def __init__(self, store: TaskStore, users: UserService):
        self.store = store
        self.users = users

    def create(self, owner_id: int, payload: TaskIn) -> Task:
        owner = self.users.find_one(owner_id)
        task = self.store.save(Task(
            title=payload.title,
            description=payload.description,
            user=owner,
        ))
        logger.info("Created task %s for user %s", task.id, owner.id)
        return task

    def find_all(self, owner_id: int) -> List[Task]:
        return self.store.list_by_owner(owner_id)

    def find_one(self, task_id: int, owner_id: int) -> Task:
        # Existence first: a missing id is 404 whoever asks
        task = self.store.get(task_id)
        if task is None:
            raise NotFound(f"Task #{task_id} not found")

        if task.user_id != owner_id:
            logger.warning("User %s denied access to task %s", owner_id, task_id)
            raise Forbidden("You can only access your own tasks")

        return task

    def remove(self, task_id: int, owner_id: int) -> Task:
        task = self.store.delete(self.find_one(task_id, owner_id))
        logger.info("Deleted task %s for user %s", task_id, owner_id)
        return task
