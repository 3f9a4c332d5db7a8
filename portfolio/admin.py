from django.contrib import admin
from django.utils.html import format_html

from .controllers import PortfolioController
from .models import PortfolioItem


@admin.register(PortfolioItem)
class PortfolioItemAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "status", "preview", "created_at")
    list_filter = ("status",)
    search_fields = ("title", "description")
    ordering = ("-created_at", "-id")
    readonly_fields = ("created_at", "preview")

    def preview(self, obj):
        if not obj.image_url:
            return ""
        return format_html('<img src="{}" style="height:48px;border-radius:4px;" alt="">', obj.image_url)
    preview.short_description = "image"

    # deletes go through the controller so the stored image is released too
    def delete_model(self, request, obj):
        PortfolioController().delete(obj.pk)

    def delete_queryset(self, request, queryset):
        controller = PortfolioController()
        for pk in queryset.values_list("pk", flat=True):
            controller.delete(pk)
