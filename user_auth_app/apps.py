import atexit

from django.apps import AppConfig


class UserAuthAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "user_auth_app"

    def ready(self):
        from user_auth_app.sessions import AdminSessionRegistry

        self.sessions = AdminSessionRegistry()
        atexit.register(self.sessions.close_all)
