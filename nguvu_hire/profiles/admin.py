from django.contrib import admin

from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "role", "employer_type", "company_name", "country", "is_verified", "is_active")
    list_filter = ("role", "employer_type", "is_verified", "is_active")
    search_fields = ("user__username", "user__email", "first_name", "last_name", "company_name")
