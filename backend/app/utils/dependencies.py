import logging
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..models.user import Role
from .error_handlers import AuthError
from .jwt import decode_access_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches us and becomes the uniform 401 body.
_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The verified caller, as read from the bearer token."""
    user_id: str
    role: Role


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Principal:
    if credentials is None or not credentials.credentials:
        raise AuthError()

    claims = decode_access_token(credentials.credentials)
    if not claims:
        logger.info("Rejected bearer token (invalid or expired)")
        raise AuthError()

    user_id = claims.get("sub")
    try:
        role = Role(claims.get("role"))
    except ValueError:
        role = None
    if not user_id or role is None:
        logger.warning("Rejected bearer token with incomplete claims")
        raise AuthError()

    return Principal(user_id=str(user_id), role=role)
