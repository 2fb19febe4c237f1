from fastapi import Depends

from auth.services.auth_service import get_current_user
from core.exceptions import ForbiddenException
from user.models import Role, User

# admin ⊇ management ⊇ staff
ROLE_TIERS = {Role.staff.value: 1, Role.management.value: 2, Role.admin.value: 3}


def has_tier(user: User, minimum: Role) -> bool:
    return ROLE_TIERS.get(user.role, 0) >= ROLE_TIERS[minimum.value]


def require_management(user: User = Depends(get_current_user)) -> User:
    if not has_tier(user, Role.management):
        raise ForbiddenException("Not authorized as management")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not has_tier(user, Role.admin):
        raise ForbiddenException("Not authorized as admin")
    return user
