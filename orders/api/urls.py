from django.urls import path
from .views import (
    AdminOrderDetailAPIView,
    AdminOrderListAPIView,
    OrderCountAPIView,
    OrderCreateAPIView,
    OrderDeliverAPIView,
    OrderStatusLookupAPIView,
)

urlpatterns = [
    path("orders/", OrderCreateAPIView.as_view(), name="order-create"),
    path("orders/<str:order_id>/status/", OrderStatusLookupAPIView.as_view(), name="order-status"),
    path("admin/orders/", AdminOrderListAPIView.as_view(), name="admin-order-list"),
    path("admin/orders/<str:order_id>/", AdminOrderDetailAPIView.as_view(), name="admin-order-detail"),
    path("admin/orders/<str:order_id>/deliver/", OrderDeliverAPIView.as_view(), name="order-deliver"),
    path("admin/order-count/", OrderCountAPIView.as_view(), name="order-count"),
]
