from django.contrib import admin

from .models import Ad


@admin.register(Ad)
class AdAdmin(admin.ModelAdmin):
    list_display = ("title", "ad_type", "is_active", "created_at")
    list_filter = ("ad_type", "is_active")
    search_fields = ("title", "description")
