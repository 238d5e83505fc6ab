from django.contrib import admin

from .models import VerificationDocument, VerificationRequest


class VerificationDocumentInline(admin.TabularInline):
    model = VerificationDocument
    extra = 0
    readonly_fields = ("file_name", "file_size", "mime_type", "uploaded_at")


@admin.register(VerificationRequest)
class VerificationRequestAdmin(admin.ModelAdmin):
    list_display = ("user", "plan", "status", "created_at", "reviewed_at")
    list_filter = ("status", "plan")
    inlines = [VerificationDocumentInline]
