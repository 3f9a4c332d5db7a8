"""Orders API serializers.

Input/output serializers for placing orders from the storefront, showing an
order's status to its customer, listing orders on the admin dashboard,
patching status, and running a delivery.
"""

from rest_framework import serializers

from common.catalog import service_titles
from orders.models import Order


class OrderCreateSerializer(serializers.Serializer):
    """Input serializer for the public order form.

    Validates:
    - every contact/detail field is present and non-blank
    - service is one of the compiled-in catalog titles
    - the optional attachment is a non-empty file
    """

    customer_name = serializers.CharField(max_length=200)
    contact_number = serializers.CharField(max_length=50)
    email = serializers.EmailField()
    service = serializers.CharField(max_length=200)
    details = serializers.CharField()
    file = serializers.FileField(required=False, allow_empty_file=False)

    def validate_service(self, value):
        if value not in service_titles():
            raise serializers.ValidationError("Please choose one of the available services.")
        return value


class OrderOutputSerializer(serializers.ModelSerializer):
    """Read serializer for returning a complete order representation."""

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_name",
            "contact_number",
            "email",
            "service",
            "details",
            "file_url",
            "status",
            "created_at",
            "completed_at",
            "price",
            "delivery_file_url",
        ]


class OrderStatusSerializer(serializers.ModelSerializer):
    """What a customer sees when looking up an order by id."""

    class Meta:
        model = Order
        fields = ["id", "service", "status", "created_at", "completed_at", "price", "delivery_file_url"]


class OrderStatusPatchSerializer(serializers.Serializer):
    """Patch serializer used to update only the order status."""

    status = serializers.ChoiceField(choices=Order.Status.choices)


class DeliverySerializer(serializers.Serializer):
    file = serializers.FileField(allow_empty_file=False)
    price = serializers.CharField(max_length=50, trim_whitespace=True)


class DashboardQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=["All", *Order.Status.values], required=False, default="All"
    )
    sort = serializers.ChoiceField(choices=["desc", "asc"], required=False, default="desc")
