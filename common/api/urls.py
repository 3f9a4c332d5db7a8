from django.urls import path
from .views import ServiceCatalogAPIView

urlpatterns = [
    path("services/", ServiceCatalogAPIView.as_view(), name="service-list"),
]
