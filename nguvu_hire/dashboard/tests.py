from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from nguvu_hire.dashboard.models import Notification
from nguvu_hire.dashboard.services.notifications import admin_users, mark_types_read, notify, notify_admins, unread_count
from nguvu_hire.job_list.models import Availability, Job
from nguvu_hire.job_list.services.feed import KIND_JOBS, KIND_TALENT
from nguvu_hire.profiles.models import ROLE_ADMIN, ROLE_EMPLOYER


def make_user(username, role=None, country="Kenya"):
    user = User.objects.create_user(username=username, password="x")
    profile = user.profile
    if role:
        profile.role = role
    profile.country = country
    profile.save()
    return user


class NotificationServiceTests(TestCase):
    def setUp(self):
        self.user = make_user("notified")

    def test_notify_and_counts(self):
        notify(self.user, "Hi", "First", type="hire_request")
        notify(self.user, "Hi", "Second", type="system")
        self.assertEqual(unread_count(self.user), 2)
        self.assertEqual(mark_types_read(self.user, ["hire_request"]), 1)
        self.assertEqual(unread_count(self.user), 1)

    def test_notify_admins_reaches_staff_and_admin_role(self):
        staff = User.objects.create_user(username="staff", password="x", is_staff=True)
        role_admin = make_user("roleadmin", role=ROLE_ADMIN)
        inactive = User.objects.create_user(username="old", password="x", is_staff=True, is_active=False)

        self.assertEqual(set(admin_users()), {staff, role_admin})
        self.assertEqual(notify_admins("Heads up", "Queue"), 2)
        self.assertFalse(Notification.objects.filter(user=inactive).exists())


class DashboardViewTests(TestCase):
    def setUp(self):
        self.seeker = make_user("seeker")
        self.employer = make_user("employer", role=ROLE_EMPLOYER)
        Job.objects.create(title="Kenya job", description="d", country="Kenya", created_by=self.employer)
        Job.objects.create(title="Qatar job", description="d", country="Qatar", created_by=self.employer)
        Availability.objects.create(name="Candidate", desired_job="Driver", country="Uganda", created_by=self.seeker)

    def test_missing_country_goes_to_onboarding(self):
        user = make_user("fresh", country="")
        self.client.force_login(user)
        resp = self.client.get(reverse("dashboard:dashboard"))
        self.assertRedirects(resp, reverse("profiles:onboarding"), fetch_redirect_response=False)

    def test_seeker_sees_jobs_with_prefilled_region(self):
        self.client.force_login(self.seeker)
        resp = self.client.get(reverse("dashboard:dashboard"))
        self.assertEqual(resp.context["kind"], KIND_JOBS)
        self.assertEqual(resp.context["to_country"], "Kenya")
        # prefilled but not applied
        self.assertEqual(resp.context["feed"].total_posts, 2)

    def test_region_filters_apply_once_submitted(self):
        self.client.force_login(self.seeker)
        resp = self.client.get(reverse("dashboard:dashboard"), {"to": "Qatar"})
        self.assertEqual([j.title for j in resp.context["feed"].posts], ["Qatar job"])

        resp = self.client.get(reverse("dashboard:dashboard"), {"local": "1"})
        self.assertTrue(resp.context["show_local"])
        # local means both sides: jobs in Kenya preferring Kenyan candidates
        self.assertEqual(resp.context["feed"].total_posts, 0)

    def test_employer_sees_talent(self):
        self.client.force_login(self.employer)
        resp = self.client.get(reverse("dashboard:dashboard"), {"from": "UG"})
        self.assertEqual(resp.context["kind"], KIND_TALENT)
        self.assertEqual([a.name for a in resp.context["feed"].posts], ["Candidate"])


class NotificationViewTests(TestCase):
    def setUp(self):
        self.user = make_user("reader")
        self.client.force_login(self.user)

    def test_mark_read_redirects_by_type(self):
        note = notify(self.user, "New hire request", "msg", type="hire_request")
        resp = self.client.post(reverse("dashboard:mark_notification_read", args=[note.id]))
        self.assertRedirects(resp, reverse("hires:hire_requests"), fetch_redirect_response=False)
        note.refresh_from_db()
        self.assertTrue(note.is_read)

        system = notify(self.user, "System", "msg")
        resp = self.client.post(reverse("dashboard:mark_notification_read", args=[system.id]))
        self.assertRedirects(resp, reverse("dashboard:notifications"), fetch_redirect_response=False)

    def test_cannot_touch_other_users_notifications(self):
        other = make_user("other")
        note = notify(other, "Private", "msg")
        resp = self.client.post(reverse("dashboard:delete_notification", args=[note.id]))
        self.assertEqual(resp.status_code, 404)

    def test_bulk_actions_and_unread_endpoint(self):
        notify(self.user, "A", "a")
        notify(self.user, "B", "b")
        self.assertEqual(self.client.get(reverse("dashboard:unread_count")).json(), {"unread": 2})

        resp = self.client.post(reverse("dashboard:mark_all_read"), HTTP_X_REQUESTED_WITH="XMLHttpRequest")
        self.assertEqual(resp.json()["ok"], True)
        self.assertEqual(unread_count(self.user), 0)

        self.client.post(reverse("dashboard:delete_all_notifications"))
        self.assertFalse(Notification.objects.filter(user=self.user).exists())

    def test_notifications_page_lists(self):
        notify(self.user, "Welcome", "Hello there")
        resp = self.client.get(reverse("dashboard:notifications"))
        self.assertContains(resp, "Hello there")
        self.assertEqual(resp.context["unread"], 1)
