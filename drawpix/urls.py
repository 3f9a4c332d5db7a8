from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("common.api.urls")),
    path("api/", include("orders.api.urls")),
    path("api/", include("portfolio.api.urls")),
    path("api/", include("offers.api.urls")),
    path("api/", include("user_auth_app.api.urls")),
    path("api/", include("chatbot.api.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
