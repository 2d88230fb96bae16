# backend/users/permissions.py
from rest_framework.permissions import BasePermission

from .models import RoleName


def role_name(user):
    return getattr(user, "get_active_role_name", lambda: None)() if user and user.is_authenticated else None


class IsAuthenticatedAndHasRole(BasePermission):
    required_roles = ()  # override per subclass

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        # Staff bypass = treat as head of faculty
        if request.user.is_staff:
            return True
        rn = role_name(request.user)
        return rn in self.required_roles if self.required_roles else True


# ---- Role gates --------------------------------------------------------------

class IsCOC(IsAuthenticatedAndHasRole):
    required_roles = (RoleName.COC,)


class IsChairHeadOrCOC(IsAuthenticatedAndHasRole):
    required_roles = (RoleName.CHAIR_HEAD, RoleName.COC)


class IsInstructorRole(IsAuthenticatedAndHasRole):
    required_roles = (RoleName.INSTRUCTOR, RoleName.CHAIR_HEAD, RoleName.COC)
