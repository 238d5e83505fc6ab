"""Upload checks shared by the application form and verification documents."""

import os

from django.conf import settings
from django.core.exceptions import ValidationError


def max_upload_bytes():
    return getattr(settings, "NGUVU_UPLOAD_MAX_BYTES", 5 * 1024 * 1024)


def validate_file_size(f):
    limit = max_upload_bytes()
    if f.size > limit:
        raise ValidationError(f"File too large. Maximum size is {limit // (1024 * 1024)} MB.")


def validate_pdf(f):
    ext = os.path.splitext(f.name or "")[1].lower()
    content_type = getattr(f, "content_type", "") or ""
    if ext != ".pdf" or (content_type and content_type != "application/pdf"):
        raise ValidationError("Only PDF files are accepted.")
    validate_file_size(f)
