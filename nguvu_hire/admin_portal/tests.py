from datetime import timedelta

from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from nguvu_hire.admin_portal.models import AuditLog
from nguvu_hire.ads.models import Ad
from nguvu_hire.billing.models import Payment
from nguvu_hire.billing.services.boosts import get_credits
from nguvu_hire.billing.services.payments import create_boost_payment
from nguvu_hire.dashboard.models import Notification
from nguvu_hire.job_list.models import Availability, Job
from nguvu_hire.profiles.models import ROLE_ADMIN, ROLE_EMPLOYER
from nguvu_hire.verification.models import VerificationRequest


class PortalAccessTests(TestCase):
    def test_non_staff_are_sent_to_login(self):
        user = User.objects.create_user(username="regular", password="x")
        self.client.force_login(user)
        for name in ("overview", "users", "billing", "reports", "audit_log"):
            resp = self.client.get(reverse(f"admin_portal:{name}"))
            self.assertEqual(resp.status_code, 302, name)

    def test_staff_pages_render(self):
        staff = User.objects.create_user(username="staff", password="x", is_staff=True)
        self.client.force_login(staff)
        for name in (
            "overview", "users", "permissions", "posts", "ads", "ad_create", "verifications",
            "billing", "messages", "broadcast", "reports", "audit_log",
        ):
            resp = self.client.get(reverse(f"admin_portal:{name}"))
            self.assertEqual(resp.status_code, 200, name)


class PortalActionTests(TestCase):
    def setUp(self):
        self.staff = User.objects.create_user(username="ops", password="x", is_staff=True)
        self.member = User.objects.create_user(username="member", password="x")
        self.client.force_login(self.staff)

    def test_toggle_active_is_audited(self):
        self.client.post(reverse("admin_portal:user_toggle_active", args=[self.member.pk]))
        self.member.refresh_from_db()
        self.assertFalse(self.member.is_active)
        self.assertFalse(self.member.profile.is_active)
        log = AuditLog.objects.get()
        self.assertEqual(log.actor, self.staff)
        self.assertEqual(log.action, "update")

    def test_cannot_deactivate_self(self):
        self.client.post(reverse("admin_portal:user_toggle_active", args=[self.staff.pk]))
        self.staff.refresh_from_db()
        self.assertTrue(self.staff.is_active)

    def test_admin_role_grants_staff(self):
        self.client.post(reverse("admin_portal:user_set_role", args=[self.member.pk]), {"role": ROLE_ADMIN})
        self.member.refresh_from_db()
        self.assertTrue(self.member.is_staff)
        self.assertEqual(self.member.profile.role, ROLE_ADMIN)

        self.client.post(reverse("admin_portal:user_set_role", args=[self.member.pk]), {"role": ROLE_EMPLOYER})
        self.member.refresh_from_db()
        self.assertFalse(self.member.is_staff)
        self.assertEqual(AuditLog.objects.filter(action="role").count(), 2)

    def test_delete_post(self):
        job = Job.objects.create(title="Spam", description="d", created_by=self.member)
        self.client.post(reverse("admin_portal:post_delete", args=["job", job.pk]))
        self.assertFalse(Job.objects.exists())
        resp = self.client.post(reverse("admin_portal:post_delete", args=["service", 1]))
        self.assertEqual(resp.status_code, 403)

    def test_posts_list_merges_types_newest_first(self):
        older = Job.objects.create(title="Welder", description="d", created_by=self.member)
        talent = Availability.objects.create(name="Amani", desired_job="Chef", created_by=self.member)
        newer = Job.objects.create(title="Mason", description="d", created_by=self.member)
        Job.objects.update(created_at=talent.created_at - timedelta(hours=1))

        resp = self.client.get(reverse("admin_portal:posts"))
        rows = list(resp.context["page_obj"])
        self.assertEqual([row["title"] for row in rows], ["Chef", "Mason", "Welder"])
        self.assertEqual([rows[1]["obj"], rows[2]["obj"]], [newer, older])

        resp = self.client.get(reverse("admin_portal:posts"), {"type": "availability"})
        self.assertEqual([row["obj"] for row in resp.context["page_obj"]], [talent])
        self.assertEqual(resp.context["page_obj"].paginator.count, 1)

    def test_ad_lifecycle(self):
        self.client.post(reverse("admin_portal:ad_create"), {
            "title": "Visa services",
            "description": "Fast processing",
            "image_url": "https://example.com/ad.png",
            "ad_type": "image",
            "target_url": "https://example.com",
            "is_active": "on",
        })
        ad = Ad.objects.get()
        self.client.post(reverse("admin_portal:ad_toggle", args=[ad.pk]))
        ad.refresh_from_db()
        self.assertFalse(ad.is_active)
        self.client.post(reverse("admin_portal:ad_delete", args=[ad.pk]))
        self.assertFalse(Ad.objects.exists())
        self.assertEqual(
            list(AuditLog.objects.order_by("id").values_list("action", flat=True)),
            ["create", "update", "delete"],
        )

    def test_complete_payment_from_billing(self):
        payment = create_boost_payment(self.member, "boost_5")
        self.client.post(reverse("admin_portal:payment_complete", args=[payment.pk]))
        payment.refresh_from_db()
        self.assertEqual(payment.status, Payment.STATUS_COMPLETED)
        self.assertEqual(get_credits(self.member).credits_available, 6)
        self.assertTrue(AuditLog.objects.filter(action="payment").exists())

    def test_only_submitted_verifications_can_be_decided(self):
        vrequest = VerificationRequest.objects.create(user=self.member)
        resp = self.client.post(reverse("admin_portal:verification_approve", args=[vrequest.pk]), follow=True)
        self.assertContains(resp, "Only requests under review can be decided")
        vrequest.refresh_from_db()
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_PENDING)
        self.assertFalse(User.objects.get(pk=self.member.pk).profile.is_verified)
        self.assertFalse(AuditLog.objects.filter(action="approve").exists())

        vrequest.status = VerificationRequest.STATUS_UNDER_REVIEW
        vrequest.save()
        self.client.post(reverse("admin_portal:verification_approve", args=[vrequest.pk]))
        self.client.post(reverse("admin_portal:verification_reject", args=[vrequest.pk]), {"notes": "late"})
        vrequest.refresh_from_db()
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_APPROVED)
        self.assertTrue(User.objects.get(pk=self.member.pk).profile.is_verified)
        self.assertFalse(AuditLog.objects.filter(action="reject").exists())

    def test_broadcast_to_group(self):
        employer = User.objects.create_user(username="hirer", password="x")
        employer.profile.role = ROLE_EMPLOYER
        employer.profile.save()
        self.client.post(reverse("admin_portal:broadcast"), {
            "target": ROLE_EMPLOYER,
            "title": "Maintenance",
            "message": "Back soon",
        })
        self.assertEqual(list(Notification.objects.values_list("user__username", flat=True)), ["hirer"])
        log = AuditLog.objects.get(action="broadcast")
        self.assertEqual(log.metadata["sent"], 1)

    def test_reports_export_csv(self):
        Job.objects.create(title="Counted", description="d", created_by=self.member)
        resp = self.client.get(reverse("admin_portal:reports_export"))
        self.assertEqual(resp["Content-Type"], "text/csv")
        body = resp.content.decode()
        self.assertTrue(body.startswith("month,new_users,new_jobs,new_availabilities"))
        self.assertIn("jobs,1", body)
