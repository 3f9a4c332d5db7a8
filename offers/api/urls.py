from django.urls import path
from .views import (
    AdminOfferDetailAPIView,
    AdminOfferListCreateAPIView,
    AdminOfferToggleAPIView,
    OfferPublicListAPIView,
)

urlpatterns = [
    path("offers/", OfferPublicListAPIView.as_view(), name="offer-list"),
    path("admin/offers/", AdminOfferListCreateAPIView.as_view(), name="admin-offer-list"),
    path("admin/offers/<int:pk>/", AdminOfferDetailAPIView.as_view(), name="admin-offer-detail"),
    path("admin/offers/<int:pk>/toggle/", AdminOfferToggleAPIView.as_view(), name="admin-offer-toggle"),
]
