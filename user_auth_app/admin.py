from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from rest_framework.authtoken.models import Token

from user_auth_app.sessions import get_session_registry

User = get_user_model()

try:
    admin.site.unregister(User)
except admin.sites.NotRegistered:
    pass


@admin.register(User)
class DashboardUserAdmin(DjangoUserAdmin):
    """
    Dashboard accounts. Email is the login; is_staff opens the admin API.
    Shows whether the account holds an API token and a live dashboard session.
    """
    list_display = (
        "id",
        "email",
        "is_staff",
        "has_token",
        "dashboard_open",
        "date_joined",
        "last_login",
    )
    ordering = ("-date_joined", "-id")
    search_fields = ("email",)
    list_filter = ("is_staff", "is_active")
    actions = ["sign_out"]

    @admin.display(boolean=True, description="token")
    def has_token(self, obj):
        return Token.objects.filter(user=obj).exists()

    @admin.display(boolean=True, description="live dashboard")
    def dashboard_open(self, obj):
        session = get_session_registry().get(obj)
        return bool(session and session.active)

    @admin.action(description="Sign out selected accounts")
    def sign_out(self, request, queryset):
        registry = get_session_registry()
        for user in queryset:
            registry.close(user)
        deleted, _ = Token.objects.filter(user__in=queryset).delete()
        self.message_user(request, f"Signed out {queryset.count()} account(s); {deleted} token(s) revoked.")
