"""Request/response schemas for the Users app."""
from datetime import datetime
from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from ninja import Schema
from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import User

PASSWORD_MIN_LENGTH = 6
EMAIL_MAX_LENGTH = User._meta.get_field('email').max_length
NAME_MAX_LENGTH = User._meta.get_field('first_name').max_length


class CamelSchema(Schema):
    """Schema whose JSON keys are camelCase (firstName) while attributes stay snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def check_email(value: str) -> str:
    try:
        validate_email(value)
    except DjangoValidationError:
        raise ValueError("Invalid email") from None
    return value


def check_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Must not be empty")
    return value


class UserCreate(CamelSchema):
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH, examples=["user@example.com"])
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, examples=["password123"])
    first_name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["John"])
    last_name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Doe"])

    @field_validator('email')
    @classmethod
    def email_format(cls, value):
        return check_email(value)

    @field_validator('first_name', 'last_name')
    @classmethod
    def names_not_blank(cls, value):
        return check_not_blank(value)


class UserUpdate(CamelSchema):
    email: Optional[str] = Field(None, max_length=EMAIL_MAX_LENGTH)
    password: Optional[str] = Field(None, min_length=PASSWORD_MIN_LENGTH)
    first_name: Optional[str] = Field(None, max_length=NAME_MAX_LENGTH)
    last_name: Optional[str] = Field(None, max_length=NAME_MAX_LENGTH)

    @field_validator('email')
    @classmethod
    def email_format(cls, value):
        return value if value is None else check_email(value)

    @field_validator('first_name', 'last_name')
    @classmethod
    def names_not_blank(cls, value):
        return value if value is None else check_not_blank(value)


class UserOut(CamelSchema):
    id: int
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime


class LoginIn(Schema):
    email: str
    password: str


class CallerOut(CamelSchema):
    id: int
    email: str
    first_name: str
    last_name: str


class TokenOut(CamelSchema):
    access_token: str
    token_type: str = "Bearer"
    user: UserOut
