"""
Service assembly.

Builds the object graph in dependency order and hands references down
explicitly:

    PasswordHasher -> UserStore -> UserService -> TaskStore -> TaskService

Routers call get_services() instead of constructing anything themselves.
"""
from dataclasses import dataclass
from functools import lru_cache

from apps.users.hashing import PasswordHasher
from apps.users.repositories import UserStore
from apps.users.services import UserService
from apps.tasks.repositories import TaskStore
from apps.tasks.services import TaskService


@dataclass(frozen=True)
class Services:
    hasher: PasswordHasher
    users: UserService
    tasks: TaskService


def build_services() -> Services:
    hasher = PasswordHasher()
    users = UserService(UserStore(), hasher)
    tasks = TaskService(TaskStore(), users)
    return Services(hasher=hasher, users=users, tasks=tasks)


@lru_cache(maxsize=None)
def get_services() -> Services:
    """Process-wide services, built on first use."""
    return build_services()
