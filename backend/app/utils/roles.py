from fastapi import Depends

from ..models.user import Role
from .dependencies import Principal, get_current_user
from .error_handlers import AuthError


def _roles_required(*allowed: Role):
    allowed_set = frozenset(allowed)

    def check_role(user: Principal = Depends(get_current_user)) -> Principal:
        # Role mismatches answer 401 like a missing token.
        if user.role not in allowed_set:
            raise AuthError()
        return user
    return check_role


any_authenticated = _roles_required(*Role)
employer_or_admin = _roles_required(Role.EMPLOYER, Role.ADMIN)
seeker_only = _roles_required(Role.SEEKER)
admin_only = _roles_required(Role.ADMIN)
