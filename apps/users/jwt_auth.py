"""
JWT utilities for the Task Manager API.

Issues and validates the bearer access tokens consumed by JWTBearer.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from django.conf import settings

from .models import User

TOKEN_TYPE_ACCESS = 'access'


def create_access_token(user: User) -> str:
    """
    Create an access token carrying the caller identity.

    Expires after settings.JWT_ACCESS_TOKEN_MINUTES (one day by default).
    """
    now = datetime.now(timezone.utc)
    payload = {
        'sub': str(user.id),
        'email': user.email,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'iat': now,
        'exp': now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_MINUTES),
        'type': TOKEN_TYPE_ACCESS,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload if valid, None if invalid/expired.
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
