from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from nguvu_hire.dashboard.models import Notification
from nguvu_hire.hires.forms import HireRequestForm
from nguvu_hire.hires.models import Hire
from nguvu_hire.job_list.models import Availability
from nguvu_hire.profiles.models import ROLE_EMPLOYER


class HireRequestFormTests(TestCase):
    def test_compose_appends_contact_block(self):
        form = HireRequestForm({"message": "Join us", "contact_info": "hr@acme.test"})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.compose(), "Join us\n\nContact Information:\nhr@acme.test")

    def test_both_fields_required(self):
        form = HireRequestForm({"message": "Join us"})
        self.assertFalse(form.is_valid())
        self.assertIn("contact_info", form.errors)


class HireFlowTests(TestCase):
    def setUp(self):
        self.employer = User.objects.create_user(username="boss", password="x")
        profile = self.employer.profile
        profile.role = ROLE_EMPLOYER
        profile.employer_type = "company"
        profile.company_name = "Savanna Builders"
        profile.save()

        self.seeker = User.objects.create_user(username="mason", password="x")
        self.availability = Availability.objects.create(
            name="Musa Bello", desired_job="Mason", country="Nigeria", created_by=self.seeker
        )

    def _send(self):
        self.client.force_login(self.employer)
        return self.client.post(
            reverse("hires:send_hire_request", args=[self.availability.id]),
            {"message": "We need you on site.", "contact_info": "+234 800 000 0000"},
        )

    def test_employer_sends_request_and_candidate_is_notified(self):
        resp = self._send()
        self.assertRedirects(resp, reverse("hires:sent_requests"))

        hire = Hire.objects.get()
        self.assertEqual(hire.job_seeker, self.seeker)
        self.assertEqual(hire.desired_position, "Mason")
        self.assertIn("Contact Information:\n+234 800 000 0000", hire.employer_message)
        self.assertTrue(hire.is_pending)

        note = Notification.objects.get(user=self.seeker, type="hire_request")
        self.assertEqual(note.message, "Savanna Builders wants to hire you for Mason")

    def test_job_seeker_cannot_send_request(self):
        other = User.objects.create_user(username="peer", password="x")
        self.client.force_login(other)
        self.client.post(
            reverse("hires:send_hire_request", args=[self.availability.id]),
            {"message": "hi", "contact_info": "me"},
        )
        self.assertFalse(Hire.objects.exists())

    def test_candidate_accepts(self):
        self._send()
        hire = Hire.objects.get()
        self.client.force_login(self.seeker)

        resp = self.client.get(reverse("hires:hire_requests"))
        self.assertContains(resp, "Savanna Builders")
        self.assertFalse(Notification.objects.filter(user=self.seeker, is_read=False).exists())

        self.client.post(reverse("hires:respond_to_hire", args=[hire.id]), {"action": "accept", "response": "Ready Monday"})
        hire.refresh_from_db()
        self.assertEqual(hire.status, Hire.STATUS_ACCEPTED)
        self.assertEqual(hire.job_seeker_response, "Ready Monday")
        note = Notification.objects.get(user=self.employer, type="hire_status_update")
        self.assertEqual(note.message, "🎉 Musa Bello accepted your hire request for Mason!")

    def test_candidate_declines(self):
        self._send()
        hire = Hire.objects.get()
        self.client.force_login(self.seeker)
        self.client.post(reverse("hires:respond_to_hire", args=[hire.id]), {"action": "reject"})
        hire.refresh_from_db()
        self.assertEqual(hire.status, Hire.STATUS_REJECTED)
        note = Notification.objects.get(user=self.employer, type="hire_status_update")
        self.assertTrue(note.message.startswith("😞 Musa Bello declined"))

    def test_only_candidate_can_respond(self):
        self._send()
        hire = Hire.objects.get()
        resp = self.client.post(reverse("hires:respond_to_hire", args=[hire.id]), {"action": "accept"})
        self.assertEqual(resp.status_code, 403)

    def test_hire_survives_listing_deletion(self):
        self._send()
        self.availability.delete()
        hire = Hire.objects.get()
        self.assertIsNone(hire.availability)
        self.assertEqual(hire.job_seeker_name, "Musa Bello")
