from django.contrib import admin

from .models import Hire


@admin.register(Hire)
class HireAdmin(admin.ModelAdmin):
    list_display = ("employer", "job_seeker_name", "desired_position", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("job_seeker_name", "desired_position", "employer__username")
