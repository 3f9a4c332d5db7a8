"""Auth API permissions.

Registration can be switched off with DRAWPIX_ALLOW_ADMIN_SIGNUP.
"""

from django.conf import settings
from rest_framework.permissions import AllowAny, BasePermission


class AllowAdminSignup(BasePermission):
    """Allow registration only while admin sign-up is enabled."""

    message = "Admin sign-up is disabled."

    def has_permission(self, request, view):
        return bool(settings.DRAWPIX_ALLOW_ADMIN_SIGNUP)


class AllowedAnyLogin(AllowAny):
    """Explicit alias for login endpoints (semantics: allow any)."""
    pass
