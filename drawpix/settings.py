"""Django settings for the Hi Drawpix backend.

Values come from the environment (optionally a `.env` file next to
manage.py). Defaults are suitable for local development only.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-key-change-me")
DEBUG = _env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "rest_framework.authtoken",
    "common",
    "orders",
    "portfolio",
    "offers",
    "user_auth_app",
    "chatbot",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "drawpix.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "drawpix.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator", "OPTIONS": {"min_length": 6}},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
MEDIA_URL = os.getenv("MEDIA_URL", "/media/")
MEDIA_ROOT = os.getenv("MEDIA_ROOT", str(BASE_DIR / "media"))

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.TokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
}

# --------------------------------- email ---------------------------------

EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
DEFAULT_FROM_EMAIL = os.getenv("DEFAULT_FROM_EMAIL", "Hi Drawpix Team <no-reply@hidrawpix.com>")

# -------------------------------- drawpix --------------------------------

DRAWPIX_ALLOW_ADMIN_SIGNUP = _env_bool("DRAWPIX_ALLOW_ADMIN_SIGNUP", True)
DRAWPIX_NOTIFICATION_SECONDS = int(os.getenv("DRAWPIX_NOTIFICATION_SECONDS", "5"))

# prefix for stored file URLs; links in emails must carry a host
DRAWPIX_PUBLIC_BASE_URL = os.getenv("DRAWPIX_PUBLIC_BASE_URL", "http://localhost:8000")

DRAWPIX_UPLOAD_NAMESPACES = {
    "order_attachment": "order-attachments",
    "delivery": "delivery-files",
    "portfolio": "portfolio-images",
}

DRAWPIX_DELIVERY_EMAIL_TEMPLATE = os.getenv(
    "DRAWPIX_DELIVERY_EMAIL_TEMPLATE", "orders/email/delivery.txt"
)
DRAWPIX_DELIVERY_EMAIL_SUBJECT = "Your Hi Drawpix order is ready"
DRAWPIX_DELIVERY_FROM_NAME = "Hi Drawpix Team"

DRAWPIX_AI_API_KEY = os.getenv("DRAWPIX_AI_API_KEY", "")
DRAWPIX_AI_BASE_URL = os.getenv(
    "DRAWPIX_AI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
)
DRAWPIX_AI_MODEL = os.getenv("DRAWPIX_AI_MODEL", "gemini-flash-latest")

# -------------------------------- logging --------------------------------

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "standard"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        app: {"handlers": ["console"], "level": os.getenv("DRAWPIX_LOG_LEVEL", "INFO"), "propagate": False}
        for app in ("common", "orders", "portfolio", "offers", "user_auth_app", "chatbot")
    },
}
