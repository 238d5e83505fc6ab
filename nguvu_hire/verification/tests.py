import shutil
import tempfile

from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import transaction
from django.test import TestCase, override_settings
from django.urls import reverse

from nguvu_hire.billing.models import Payment
from nguvu_hire.billing.services.payments import complete_payment, create_verification_payment
from nguvu_hire.dashboard.models import Notification
from nguvu_hire.verification.models import VerificationDocument, VerificationRequest
from nguvu_hire.verification.services import (
    VerificationError,
    approve_request,
    missing_documents,
    reject_request,
    start_verification,
    submit_request,
    upload_document,
)

MEDIA_ROOT = tempfile.mkdtemp()


def jpeg(name="id.jpg", size=64):
    return SimpleUploadedFile(name, b"\xff\xd8\xff" + b"0" * size, content_type="image/jpeg")


def open_request(user, plan="basic_verification"):
    payment = create_verification_payment(user, plan)
    complete_payment(payment)
    return VerificationRequest.objects.get(payment=payment)


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class VerificationServiceTests(TestCase):
    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)

    def setUp(self):
        self.user = User.objects.create_user(username="verifyme", password="x", first_name="Neema")
        self.staff = User.objects.create_user(username="reviewer", password="x", is_staff=True)

    def _upload_all(self, vrequest):
        for doc_type in ("id_front", "id_back", "selfie"):
            upload_document(vrequest, doc_type, jpeg(f"{doc_type}.jpg"))

    def test_start_returns_pending_payment(self):
        payment = start_verification(self.user, "premium_verification")
        self.assertEqual(payment.payment_type, Payment.TYPE_VERIFICATION)
        self.assertTrue(payment.is_pending)

    def test_verified_user_cannot_start(self):
        self.user.profile.mark_verified()
        with self.assertRaises(VerificationError):
            start_verification(self.user, "basic_verification")

    def test_upload_replaces_same_type(self):
        vrequest = open_request(self.user)
        upload_document(vrequest, "id_front", jpeg("first.jpg"))
        upload_document(vrequest, "id_front", jpeg("second.jpg"))
        docs = VerificationDocument.objects.filter(request=vrequest)
        self.assertEqual(docs.count(), 1)
        self.assertEqual(docs.get().file_name, "second.jpg")
        self.assertEqual(missing_documents(vrequest), ["id_back", "selfie"])

    def test_replaced_file_is_deleted_only_after_commit(self):
        vrequest = open_request(self.user)
        first = upload_document(vrequest, "id_front", jpeg("first.jpg"))
        storage, old_name = first.file.storage, first.file.name

        with self.captureOnCommitCallbacks() as callbacks:
            with self.assertRaises(RuntimeError):
                with transaction.atomic():
                    upload_document(vrequest, "id_front", jpeg("second.jpg"))
                    raise RuntimeError("rolled back")
        self.assertEqual(callbacks, [])
        self.assertTrue(storage.exists(old_name))
        self.assertEqual(VerificationDocument.objects.get(request=vrequest).file_name, "first.jpg")

        with self.captureOnCommitCallbacks(execute=True):
            upload_document(vrequest, "id_front", jpeg("third.jpg"))
        self.assertFalse(storage.exists(old_name))
        self.assertEqual(VerificationDocument.objects.get(request=vrequest).file_name, "third.jpg")

    def test_rejects_bad_files(self):
        vrequest = open_request(self.user)
        with self.assertRaises(VerificationError):
            upload_document(vrequest, "id_front", SimpleUploadedFile("id.gif", b"GIF89a", content_type="image/gif"))
        with self.assertRaises(VerificationError):
            upload_document(vrequest, "id_front", SimpleUploadedFile("id.png", b"x", content_type="image/jpeg"))
        with self.assertRaises(VerificationError):
            upload_document(vrequest, "passport_scan", jpeg())
        with override_settings(NGUVU_UPLOAD_MAX_BYTES=10):
            with self.assertRaises(VerificationError):
                upload_document(vrequest, "id_front", jpeg(size=100))

    def test_submit_needs_all_documents(self):
        vrequest = open_request(self.user)
        upload_document(vrequest, "id_front", jpeg())
        with self.assertRaisesMessage(VerificationError, "ID (back)"):
            submit_request(vrequest)

    def test_submit_then_approve(self):
        vrequest = open_request(self.user)
        self._upload_all(vrequest)
        submit_request(vrequest)
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_UNDER_REVIEW)
        self.assertTrue(Notification.objects.filter(user=self.staff, type="verification_submitted").exists())

        with self.assertRaises(VerificationError):
            upload_document(vrequest, "other", jpeg())

        approve_request(vrequest, "Looks good")
        self.user.profile.refresh_from_db()
        self.assertTrue(self.user.profile.is_verified)
        self.assertEqual(vrequest.admin_notes, "Looks good")
        self.assertTrue(Notification.objects.filter(user=self.user, type="verification_approved").exists())

    def test_reject_includes_reason(self):
        vrequest = open_request(self.user)
        self._upload_all(vrequest)
        submit_request(vrequest)
        reject_request(vrequest, "Blurry photo")
        note = Notification.objects.get(user=self.user, type="verification_rejected")
        self.assertIn("Blurry photo", note.message)
        self.assertFalse(User.objects.get(pk=self.user.pk).profile.is_verified)

    def test_pending_request_cannot_be_approved(self):
        vrequest = open_request(self.user)
        with self.assertRaises(VerificationError):
            approve_request(vrequest)
        vrequest.refresh_from_db()
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_PENDING)
        self.assertFalse(User.objects.get(pk=self.user.pk).profile.is_verified)

    def test_decided_request_cannot_be_decided_again(self):
        vrequest = open_request(self.user)
        self._upload_all(vrequest)
        submit_request(vrequest)
        approve_request(vrequest)

        with self.assertRaises(VerificationError):
            reject_request(vrequest, "Changed my mind")
        vrequest.refresh_from_db()
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_APPROVED)
        self.assertTrue(User.objects.get(pk=self.user.pk).profile.is_verified)
        self.assertFalse(Notification.objects.filter(user=self.user, type="verification_rejected").exists())


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class VerificationViewTests(TestCase):
    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)

    def setUp(self):
        self.user = User.objects.create_user(username="viewverify", password="x")
        self.client.force_login(self.user)

    def test_home_and_start(self):
        resp = self.client.get(reverse("verification:home"))
        self.assertContains(resp, "Basic Verification")

        resp = self.client.post(reverse("verification:start"), {"plan": "basic_verification"})
        payment = Payment.objects.get(user=self.user)
        self.assertRedirects(resp, reverse("billing:payment_status", args=[payment.reference]))

    def test_documents_need_an_open_request(self):
        resp = self.client.get(reverse("verification:documents"))
        self.assertRedirects(resp, reverse("verification:home"))

    def test_upload_and_submit(self):
        vrequest = open_request(self.user)
        for doc_type in ("id_front", "id_back", "selfie"):
            resp = self.client.post(reverse("verification:documents"), {"document_type": doc_type, "file": jpeg()})
            self.assertRedirects(resp, reverse("verification:documents"))

        resp = self.client.post(reverse("verification:submit"))
        self.assertRedirects(resp, reverse("verification:home"))
        vrequest.refresh_from_db()
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_UNDER_REVIEW)

    def test_remove_document(self):
        vrequest = open_request(self.user)
        doc = upload_document(vrequest, "selfie", jpeg())
        self.client.post(reverse("verification:remove_document", args=[doc.id]))
        self.assertFalse(VerificationDocument.objects.filter(pk=doc.pk).exists())
