"""
Role-based permission classes for the point-of-sale API.
"""

from django.core.exceptions import PermissionDenied

from rest_framework import permissions


def require_admin(user):
    """
    Reject callers that are not shop administrators.

    Raises:
        PermissionDenied: If the user is anonymous or not an admin
    """
    if not user or not user.is_authenticated or not user.is_admin():
        raise PermissionDenied("Access denied. Administrator role required.")
    return user


class IsAdminRole(permissions.BasePermission):
    """
    Permission class allowing only users with the admin role.
    """

    message = "Access denied. Administrator role required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin())


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Authenticated users may read; only admins may write.
    """

    message = "Access denied. Administrator role required."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return user.is_admin()
