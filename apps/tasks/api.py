"""
Tasks API endpoints.

Every route requires a bearer token; the caller only ever sees their own
tasks.
"""
from typing import List

from django.http import HttpRequest
from ninja import Router

from apps.users.auth import JWTBearer, get_caller
from config.container import get_services
from .dtos import TaskIn, TaskOut

router = Router(tags=["Tasks"], auth=JWTBearer())


@router.post("", response={201: TaskOut}, by_alias=True)
def create_task(request: HttpRequest, payload: TaskIn):
    """Create a task owned by the caller."""
    caller = get_caller(request)
    return get_services().tasks.create(caller.id, payload)


@router.get("", response=List[TaskOut], by_alias=True)
def list_tasks(request: HttpRequest):
    """All tasks of the current user."""
    caller = get_caller(request)
    return get_services().tasks.find_all(caller.id)


@router.get("/{task_id}", response=TaskOut, by_alias=True)
def get_task(request: HttpRequest, task_id: int):
    caller = get_caller(request)
    return get_services().tasks.find_one(task_id, caller.id)


@router.delete("/{task_id}", response=TaskOut, by_alias=True)
def delete_task(request: HttpRequest, task_id: int):
    """Delete one of the caller's tasks. Returns the deleted task."""
    caller = get_caller(request)
    return get_services().tasks.remove(task_id, caller.id)
