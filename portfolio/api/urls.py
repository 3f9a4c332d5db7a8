from django.urls import path
from .views import (
    AdminPortfolioDetailAPIView,
    AdminPortfolioListCreateAPIView,
    PortfolioPublicListAPIView,
)

urlpatterns = [
    path("portfolio/", PortfolioPublicListAPIView.as_view(), name="portfolio-list"),
    path("admin/portfolio/", AdminPortfolioListCreateAPIView.as_view(), name="admin-portfolio-list"),
    path("admin/portfolio/<int:pk>/", AdminPortfolioDetailAPIView.as_view(), name="admin-portfolio-detail"),
]
