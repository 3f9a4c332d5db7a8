"""Shared API permissions.

The dashboard has a single role: an authenticated staff user is an admin.
Everything customer-facing is public.
"""

from rest_framework.permissions import BasePermission


class IsAdminStaff(BasePermission):
    """Allows access only to authenticated staff (admin) users."""

    message = "Only admin staff users may use the dashboard."

    def has_permission(self, request, view):
        return bool(
            request.user and request.user.is_authenticated and request.user.is_staff
        )
