"""Request/response schemas for the Tasks app."""
from pydantic import Field, field_validator

from apps.users.dtos import CamelSchema, check_not_blank
from .models import Task

TITLE_MAX_LENGTH = Task._meta.get_field('title').max_length


class TaskIn(CamelSchema):
    title: str = Field(..., max_length=TITLE_MAX_LENGTH, examples=["Buy groceries"])
    description: str = Field(..., examples=["Milk and bread"])

    @field_validator('title', 'description')
    @classmethod
    def not_blank(cls, value):
        return check_not_blank(value)


class TaskOut(CamelSchema):
    id: int
    title: str
    description: str
    user_id: int
