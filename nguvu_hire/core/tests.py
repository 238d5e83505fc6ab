from django.contrib.auth.models import User
from django.test import RequestFactory, TestCase

from nguvu_hire.core.constants import country_code, country_name
from nguvu_hire.core.models import AnalyticsEvent
from nguvu_hire.core.utils.analytics import track_event


class CountryLookupTests(TestCase):
    def test_name_from_code_or_name(self):
        self.assertEqual(country_name("ke"), "Kenya")
        self.assertEqual(country_name("kenya"), "Kenya")
        self.assertEqual(country_name("  Atlantis "), "Atlantis")
        self.assertEqual(country_name(None), "")

    def test_code_from_code_or_name(self):
        self.assertEqual(country_code("Uganda"), "UG")
        self.assertEqual(country_code("tz"), "TZ")
        self.assertEqual(country_code("Atlantis"), "")


class TrackEventTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.user = User.objects.create_user(username="tracker", password="x")

    def test_request_context_is_recorded(self):
        request = self.factory.get("/jobs/browse/", HTTP_USER_AGENT="pytest", HTTP_X_FORWARDED_FOR="10.0.0.1, 10.0.0.2")
        request.user = self.user
        event = track_event(event_type="page_view", request=request)

        self.assertIsNotNone(event)
        self.assertEqual(event.user, self.user)
        self.assertEqual(event.path, "/jobs/browse/")
        self.assertEqual(event.metadata["ip"], "10.0.0.1")
        self.assertEqual(event.metadata["ua"], "pytest")

    def test_failures_do_not_raise(self):
        result = track_event(event_type="page_view", metadata={"bad": object()})
        self.assertIsNone(result)
        self.assertFalse(AnalyticsEvent.objects.exists())


class PageViewMiddlewareTests(TestCase):
    def test_html_get_is_tracked(self):
        self.client.get("/")
        self.assertTrue(AnalyticsEvent.objects.filter(event_type="page_view", path="/").exists())

    def test_admin_paths_are_skipped(self):
        self.client.get("/admin/login/")
        self.assertFalse(AnalyticsEvent.objects.filter(path__startswith="/admin").exists())
