from django.contrib import admin

from .models import Application, Availability, Job


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("title", "company", "country", "work_location_type", "deadline", "created_by", "created_at")
    list_filter = ("work_location_type", "country")
    search_fields = ("title", "company", "description")


@admin.register(Availability)
class AvailabilityAdmin(admin.ModelAdmin):
    list_display = ("name", "desired_job", "country", "availability", "created_by", "created_at")
    search_fields = ("name", "desired_job", "skills")


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ("full_name", "job", "status", "created_at")
    list_filter = ("status",)
