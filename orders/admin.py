from django.contrib import admin
from django.utils.html import format_html
from .models import Order

STATUS_COLORS = {
    "Pending": "#f59e0b",
    "In Progress": "#0ea5e9",
    "Completed": "#22c55e",
    "Cancelled": "#ef4444",
}


def status_badge_html(value: str):
    return format_html(
        '<span style="display:inline-block;padding:2px 8px;border-radius:999px;'
        'font-size:12px;font-weight:600;color:#fff;background:{};">{}</span>',
        STATUS_COLORS.get(value, "#9ca3af"),
        value,
    )


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Order overview:
    - List: id, customer, service, status badge, price, created
    - Filter: status, service, created (date hierarchy)
    - Search: customer name, email, contact number, details
    - Read-only: everything the customer submitted and the delivery record
    """
    list_display = (
        "id",
        "customer_name",
        "service",
        "status_badge",
        "price",
        "created_at",
        "completed_at",
    )
    list_filter = ("status", "service", "created_at")
    date_hierarchy = "created_at"
    ordering = ("-created_at",)
    search_fields = ("customer_name", "email", "contact_number", "details")

    # Only status is editable here; delivery goes through the dashboard
    readonly_fields = (
        "id",
        "customer_name",
        "contact_number",
        "email",
        "service",
        "details",
        "file_url",
        "created_at",
        "completed_at",
        "price",
        "delivery_file_url",
    )
    fields = ("status",) + readonly_fields

    def status_badge(self, obj):
        return status_badge_html(obj.status)
    status_badge.short_description = "status"
    status_badge.admin_order_field = "status"
