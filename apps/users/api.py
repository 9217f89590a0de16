"""
Users API endpoints.

Provides registration and user management (public) plus the login endpoint
that issues bearer tokens for the Tasks API.
"""
from typing import List

from django.http import HttpRequest
from ninja import Router

from config.container import get_services
from .auth import JWTBearer, get_caller
from .dtos import CallerOut, LoginIn, TokenOut, UserCreate, UserOut, UserUpdate
from .jwt_auth import create_access_token

router = Router(tags=["Users"])
auth_router = Router(tags=["Auth"])


# =============================================================================
# User Management Endpoints
# =============================================================================

@router.post("", response={201: UserOut}, by_alias=True)
def create_user(request: HttpRequest, payload: UserCreate):
    """Register a new user."""
    return get_services().users.create(payload)


@router.get("", response=List[UserOut], by_alias=True)
def list_users(request: HttpRequest):
    return get_services().users.find_all()


@router.get("/{user_id}", response=UserOut, by_alias=True)
def get_user(request: HttpRequest, user_id: int):
    return get_services().users.find_one(user_id)


@router.patch("/{user_id}", response=UserOut, by_alias=True)
def update_user(request: HttpRequest, user_id: int, payload: UserUpdate):
    """
    Update any subset of email, password, firstName and lastName.
    """
    return get_services().users.update(user_id, payload.dict(exclude_unset=True))


@router.delete("/{user_id}", response=UserOut, by_alias=True)
def delete_user(request: HttpRequest, user_id: int):
    """Permanently delete a user (and their tasks). Returns the deleted user."""
    return get_services().users.remove(user_id)


# =============================================================================
# Auth Endpoints
# =============================================================================

@auth_router.post("/login", response=TokenOut, by_alias=True)
def login(request: HttpRequest, payload: LoginIn):
    """
    Exchange email and password for a bearer access token.
    """
    user = get_services().users.authenticate(payload.email, payload.password)
    return {"access_token": create_access_token(user), "user": user}


@auth_router.get("/me", response=CallerOut, auth=JWTBearer(), by_alias=True)
def me(request: HttpRequest):
    """Identity carried by the presented token."""
    return get_caller(request)
