from rest_framework.permissions import BasePermission

from .models import User


def has_role(user, *roles) -> bool:
    """
    Check the global role of an authenticated user.
    """
    if not user or not user.is_authenticated:
        return False
    return getattr(user, "role", None) in roles


class IsHacker(BasePermission):
    """Team management is reserved for hackers."""
    message = "Only hackers can manage teams."

    def has_permission(self, request, view):
        return has_role(request.user, User.ROLE_HACKER)


class IsOrganizer(BasePermission):
    message = "Only organizers can manage the schedule."

    def has_permission(self, request, view):
        return has_role(request.user, User.ROLE_ORGANIZER)

