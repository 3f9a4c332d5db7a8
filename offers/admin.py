from django.contrib import admin
from django.utils.html import format_html

from .models import Offer


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "price", "status_badge", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("title", "description")
    ordering = ("-created_at", "-id")
    readonly_fields = ("created_at",)

    def status_badge(self, obj):
        color = "#22c55e" if obj.status == Offer.Status.ACTIVE else "#9ca3af"
        return format_html(
            '<span style="display:inline-block;padding:2px 8px;border-radius:999px;'
            'font-size:12px;font-weight:600;color:#fff;background:{};">{}</span>',
            color,
            obj.status,
        )
    status_badge.short_description = "status"
    status_badge.admin_order_field = "status"
