from django.contrib import admin

from .models import AnalyticsEvent


@admin.register(AnalyticsEvent)
class AnalyticsEventAdmin(admin.ModelAdmin):
    list_display = ("event_type", "user", "path", "created_at")
    list_filter = ("event_type",)
    search_fields = ("path", "user__username")
    readonly_fields = ("created_at",)
