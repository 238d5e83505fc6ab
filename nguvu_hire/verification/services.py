from __future__ import annotations

import logging
import os
from functools import partial

from django.db import transaction
from django.utils import timezone

from nguvu_hire.billing.services.payments import create_verification_payment
from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.dashboard.services.notifications import notify, notify_admins
from nguvu_hire.job_list.utils.validators import max_upload_bytes

from .models import VerificationDocument, VerificationRequest

logger = logging.getLogger(__name__)

REQUIRED_DOCUMENTS = ("id_front", "id_back", "selfie")
ALLOWED_MIME_TYPES = {
    "image/jpeg": (".jpg", ".jpeg"),
    "image/png": (".png",),
    "application/pdf": (".pdf",),
}


class VerificationError(Exception):
    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


def current_request(user):
    """Most recent request that still belongs to the user's active flow."""
    return (
        VerificationRequest.objects.filter(user=user)
        .exclude(status=VerificationRequest.STATUS_REJECTED)
        .prefetch_related("documents")
        .order_by("-created_at", "-id")
        .first()
    )


def start_verification(user, plan: str):
    """Returns the pending Payment the user has to settle; refuses verified users."""
    if user.profile.is_verified:
        raise VerificationError("Your account is already verified.")
    return create_verification_payment(user, plan)


def missing_documents(vrequest: VerificationRequest) -> list[str]:
    have = set(vrequest.documents.values_list("document_type", flat=True))
    return [doc for doc in REQUIRED_DOCUMENTS if doc not in have]


def _check_file(upload):
    content_type = (getattr(upload, "content_type", "") or "").lower()
    ext = os.path.splitext(upload.name or "")[1].lower()
    allowed_ext = ALLOWED_MIME_TYPES.get(content_type)
    if not allowed_ext or ext not in allowed_ext:
        raise VerificationError("Only JPEG, PNG or PDF files are accepted.")
    limit = max_upload_bytes()
    if upload.size > limit:
        raise VerificationError(f"File too large. Maximum size is {limit // (1024 * 1024)} MB.")
    return content_type


def upload_document(vrequest: VerificationRequest, document_type: str, upload) -> VerificationDocument:
    """Store a document, replacing any earlier upload of the same type."""
    if not vrequest.is_editable:
        raise VerificationError("Documents can no longer be changed for this request.")
    if document_type not in dict(VerificationDocument.DOCUMENT_TYPE_CHOICES):
        raise VerificationError("Unknown document type.")
    mime_type = _check_file(upload)

    with transaction.atomic():
        for old in vrequest.documents.filter(document_type=document_type):
            if old.file:
                transaction.on_commit(partial(old.file.storage.delete, old.file.name))
            old.delete()
        document = VerificationDocument.objects.create(
            request=vrequest,
            document_type=document_type,
            file=upload,
            file_name=os.path.basename(upload.name or ""),
            file_size=upload.size,
            mime_type=mime_type,
        )
    logger.info("Verification document %s uploaded for request %s", document_type, vrequest.pk)
    return document


def remove_document(document: VerificationDocument):
    if not document.request.is_editable:
        raise VerificationError("Documents can no longer be changed for this request.")
    document.file.delete(save=False)
    document.delete()


def submit_request(vrequest: VerificationRequest) -> VerificationRequest:
    if not vrequest.is_editable:
        raise VerificationError("This request has already been submitted.")
    missing = missing_documents(vrequest)
    if missing:
        labels = dict(VerificationDocument.DOCUMENT_TYPE_CHOICES)
        raise VerificationError("Missing documents: " + ", ".join(labels[m] for m in missing))

    vrequest.status = VerificationRequest.STATUS_UNDER_REVIEW
    vrequest.save(update_fields=["status", "updated_at"])
    track_event(event_type="verification_submitted", user=vrequest.user, metadata={"request_id": vrequest.pk})
    notify_admins(
        title="Verification submitted",
        message=f"{vrequest.user.profile.display_name} submitted documents for {vrequest.get_plan_display()}.",
        type="verification_submitted",
        related_id=vrequest.pk,
    )
    return vrequest


def _ensure_under_review(vrequest: VerificationRequest):
    if vrequest.status != VerificationRequest.STATUS_UNDER_REVIEW:
        raise VerificationError(
            f"Only requests under review can be decided; this one is {vrequest.get_status_display().lower()}."
        )


def approve_request(vrequest: VerificationRequest, notes: str = "") -> VerificationRequest:
    _ensure_under_review(vrequest)
    with transaction.atomic():
        now = timezone.now()
        vrequest.status = VerificationRequest.STATUS_APPROVED
        vrequest.reviewed_at = now
        if notes:
            vrequest.admin_notes = notes
        vrequest.save(update_fields=["status", "reviewed_at", "admin_notes", "updated_at"])
        vrequest.user.profile.mark_verified(now)
    logger.info("Verification request %s approved", vrequest.pk)
    notify(
        vrequest.user,
        title="You're verified!",
        message="Your verification was approved. A verified badge now shows on your profile and posts.",
        type="verification_approved",
        related_id=vrequest.pk,
    )
    return vrequest


def reject_request(vrequest: VerificationRequest, notes: str = "") -> VerificationRequest:
    _ensure_under_review(vrequest)
    vrequest.status = VerificationRequest.STATUS_REJECTED
    vrequest.reviewed_at = timezone.now()
    vrequest.admin_notes = notes
    vrequest.save(update_fields=["status", "reviewed_at", "admin_notes", "updated_at"])
    logger.info("Verification request %s rejected", vrequest.pk)
    message = "Your verification was not approved."
    if notes:
        message += f" Reason: {notes}"
    notify(vrequest.user, title="Verification update", message=message, type="verification_rejected", related_id=vrequest.pk)
    return vrequest
