"""
Bearer-token guard for protected routes.

Attach with `Router(auth=JWTBearer())`. Requests without a valid access token
are rejected with 401 before the handler runs; otherwise ninja stores the
resolved CallerIdentity on `request.auth` and handlers read it from there.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.http import HttpRequest
from ninja.security import HttpBearer

from .jwt_auth import TOKEN_TYPE_ACCESS, decode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    id: int
    email: str
    first_name: str
    last_name: str


def identity_from_payload(payload: dict) -> Optional[CallerIdentity]:
    if payload.get('type') != TOKEN_TYPE_ACCESS:
        return None
    try:
        return CallerIdentity(
            id=int(payload['sub']),
            email=payload['email'],
            first_name=payload['firstName'],
            last_name=payload['lastName'],
        )
    except (KeyError, TypeError, ValueError):
        return None


class JWTBearer(HttpBearer):

    def authenticate(self, request: HttpRequest, token: str) -> Optional[CallerIdentity]:
        payload = decode_token(token)
        if payload is None:
            logger.info("Rejected bearer token on %s", request.path)
            return None
        return identity_from_payload(payload)


def get_caller(request: HttpRequest) -> CallerIdentity:
    """The identity JWTBearer resolved for this request."""
    return request.auth
