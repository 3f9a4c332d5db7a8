"""Orders API views.

Public: place an order (with an optional attachment) and look up an order's
status by id. Admin: the live dashboard list, status patch, hard delete,
delivery, and per-status counts.
"""

from django.db.models import Count
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from common.api.permissions import IsAdminStaff
from common.exceptions import StoreError, UploadError
from common.uploads import get_upload_gateway, namespace
from orders.lifecycle import DeliveryValidationError, OrderLifecycleController
from orders.models import Order
from orders.store import InvalidStatus, OrderNotFound, OrderStore
from user_auth_app.sessions import get_session_registry
from .serializers import (
    DashboardQuerySerializer,
    DeliverySerializer,
    OrderCreateSerializer,
    OrderOutputSerializer,
    OrderStatusPatchSerializer,
    OrderStatusSerializer,
)


# ----------------------------- helpers (module-level) -----------------------------

def _error(message: str, code=status.HTTP_500_INTERNAL_SERVER_ERROR):
    return Response({"detail": message}, status=code)


def _not_found():
    return _error("Order not found.", status.HTTP_404_NOT_FOUND)


def _validate_patch_only_status(data: dict):
    """Allow only 'status' in PATCH; return a 400 response otherwise."""
    allowed = {"status"}
    extra = set(data.keys()) - allowed
    if extra:
        return Response(
            {"detail": f"Only 'status' may be updated. Invalid fields: {', '.join(sorted(extra))}."},
            status=status.HTTP_400_BAD_REQUEST,
        )
    return None


# --------------------------------------- views ---------------------------------------

class OrderCreateAPIView(APIView):
    """POST /api/orders/ -> place an order from the public storefront form."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        attachment = data.pop("file", None)
        try:
            if attachment is not None:
                data["file_url"] = get_upload_gateway().put(namespace("order_attachment"), attachment)
            order = OrderStore().create(**data)
        except (StoreError, UploadError):
            return _error("Failed to place order. Please try again.")
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderStatusLookupAPIView(APIView):
    """GET /api/orders/{id}/status/ -> public status check for a customer."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, order_id: str):
        try:
            order = OrderStore().get_by_id(order_id.strip())
        except StoreError:
            return _error("An error occurred while fetching your order status.")
        if order is None:
            return _error("Order not found. Please check your Order ID.", status.HTTP_404_NOT_FOUND)
        return Response(OrderStatusSerializer(order).data, status=status.HTTP_200_OK)


class AdminOrderListAPIView(APIView):
    """GET /api/admin/orders/?status=All&sort=desc

    Returns the admin's live projection of all orders plus the current
    "new order" notification (null when there is none).
    """

    permission_classes = [IsAdminStaff]

    def get(self, request):
        query = DashboardQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        dashboard = get_session_registry().open(request.user).dashboard
        orders = dashboard.view(query.validated_data["status"], query.validated_data["sort"])
        note = dashboard.notification
        return Response(
            {
                "orders": OrderOutputSerializer(orders, many=True).data,
                "count": len(orders),
                "notification": None if note is None else {
                    "order_id": note.order_id,
                    "message": note.message,
                    "expires_at": note.expires_at,
                },
            },
            status=status.HTTP_200_OK,
        )


class AdminOrderDetailAPIView(APIView):
    """GET: full order. PATCH: update status (only 'status' allowed). DELETE: hard delete."""

    permission_classes = [IsAdminStaff]

    def get(self, request, order_id: str):
        try:
            order = OrderStore().get_by_id(order_id)
        except StoreError:
            return _error("Failed to load order. Please try again.")
        if order is None:
            return _not_found()
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_200_OK)

    def patch(self, request, order_id: str):
        bad = _validate_patch_only_status(request.data)
        if bad is not None:
            return bad
        serializer = OrderStatusPatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            order = OrderLifecycleController().set_status(order_id, serializer.validated_data["status"])
        except OrderNotFound:
            return _not_found()
        except InvalidStatus as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except StoreError:
            return _error("Failed to update order status. Please try again.")
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_200_OK)

    def delete(self, request, order_id: str):
        try:
            OrderStore().delete(order_id)
        except OrderNotFound:
            return _not_found()
        except StoreError:
            return _error("Failed to delete order. Please try again.")
        return Response(status=status.HTTP_204_NO_CONTENT)


class OrderDeliverAPIView(APIView):
    """POST /api/admin/orders/{id}/deliver/ (multipart: file, price)

    200 with outcome "delivered" or "delivered_notification_failed"; the
    latter still means the order is Completed and the file is stored.
    """

    permission_classes = [IsAdminStaff]

    def post(self, request, order_id: str):
        serializer = DeliverySerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        try:
            result = OrderLifecycleController().deliver(
                order_id, serializer.validated_data["file"], serializer.validated_data["price"]
            )
        except DeliveryValidationError as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except OrderNotFound:
            return _not_found()
        except (StoreError, UploadError):
            return _error("Failed to complete delivery. Please try again.")
        message = (
            "Order delivered and the customer was emailed."
            if result.notified
            else "Order delivered, but the notification email could not be sent."
        )
        return Response(
            {
                "outcome": result.outcome.value,
                "detail": message,
                "order": OrderOutputSerializer(result.order).data,
            },
            status=status.HTTP_200_OK,
        )


class OrderCountAPIView(APIView):
    """GET /api/admin/order-count/ -> {"Pending": n, "In Progress": n, ..., "total": n}."""

    permission_classes = [IsAdminStaff]

    def get(self, request):
        counts = {value: 0 for value in Order.Status.values}
        for row in Order.objects.order_by().values("status").annotate(n=Count("id")):
            counts[row["status"]] = row["n"]
        counts["total"] = sum(counts.values())
        return Response(counts, status=status.HTTP_200_OK)
