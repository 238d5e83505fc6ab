import shutil
import tempfile
from datetime import timedelta

from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone

from nguvu_hire.ads.models import Ad
from nguvu_hire.billing.models import BoostedPost
from nguvu_hire.dashboard.models import Notification
from nguvu_hire.job_list.models import Application, Availability, Job
from nguvu_hire.job_list.services.feed import (
    KIND_JOBS,
    KIND_TALENT,
    attach_boosts,
    base_queryset,
    build_feed,
    filter_posts,
    interleave_ads,
    newest,
    order_posts,
    page_window,
    paginate,
)
from nguvu_hire.job_list.services.search import region_filter
from nguvu_hire.profiles.models import ROLE_EMPLOYER

MEDIA_ROOT = tempfile.mkdtemp()


def make_employer(username="employer", **profile_fields):
    user = User.objects.create_user(username=username, password="x")
    profile = user.profile
    profile.role = ROLE_EMPLOYER
    profile.employer_type = "company"
    profile.company_name = profile_fields.pop("company_name", "Acme Ltd")
    profile.country = profile_fields.pop("country", "Kenya")
    for key, value in profile_fields.items():
        setattr(profile, key, value)
    profile.save()
    return user


def make_job(owner, title="Job", age_minutes=0, **extra):
    payload = {"title": title, "description": "desc", "country": "Kenya", "created_by": owner}
    payload.update(extra)
    job = Job.objects.create(**payload)
    if age_minutes:
        Job.objects.filter(pk=job.pk).update(created_at=timezone.now() - timedelta(minutes=age_minutes))
        job.refresh_from_db()
    return job


def pdf(name="cv.pdf", size=100):
    return SimpleUploadedFile(name, b"%PDF-1.4" + b"0" * size, content_type="application/pdf")


class PageWindowTests(TestCase):
    def test_small_totals_show_every_page(self):
        self.assertEqual(page_window(1, 1), [1])
        self.assertEqual(page_window(3, 7), [1, 2, 3, 4, 5, 6, 7])

    def test_gaps_for_large_totals(self):
        self.assertEqual(page_window(1, 10), [1, 2, 3, 4, 5, None, 10])
        self.assertEqual(page_window(10, 10), [1, None, 6, 7, 8, 9, 10])
        self.assertEqual(page_window(5, 10), [1, None, 4, 5, 6, None, 10])

    def test_empty_and_out_of_range(self):
        self.assertEqual(page_window(1, 0), [1])
        self.assertEqual(page_window(99, 10), [1, None, 6, 7, 8, 9, 10])


class InterleaveAdsTests(TestCase):
    def test_all_ads_after_every_interval(self):
        items = interleave_ads(list(range(20)), ["a", "b"], interval=9)
        self.assertEqual(len(items), 24)
        self.assertTrue(items[9].is_ad)
        self.assertTrue(items[10].is_ad)
        self.assertFalse(items[11].is_ad)
        self.assertTrue(items[20].is_ad)

    def test_no_ads_or_no_interval(self):
        self.assertEqual(len(interleave_ads(list(range(12)), [], interval=9)), 12)
        self.assertEqual(len(interleave_ads(list(range(12)), ["a"], interval=0)), 12)


class PaginateTests(TestCase):
    def test_page_number_is_clamped(self):
        self.assertEqual(paginate(list(range(30)), "99", per_page=12).page.number, 3)
        self.assertEqual(paginate(list(range(30)), "junk", per_page=12).page.number, 1)

    def test_empty_results_give_one_empty_page(self):
        feed = paginate([], 1, per_page=12)
        self.assertEqual(feed.page.number, 1)
        self.assertEqual(feed.total_posts, 0)
        self.assertEqual(feed.window, [1])


class FeedOrderingTests(TestCase):
    def setUp(self):
        self.plain = make_employer("plain")
        self.verified = make_employer("verified", is_verified=True)

    def test_verified_then_boosted_then_newest(self):
        old_verified = make_job(self.verified, "Verified", age_minutes=300)
        boosted = make_job(self.plain, "Boosted", age_minutes=200)
        newest_plain = make_job(self.plain, "Newest", age_minutes=1)
        older_plain = make_job(self.plain, "Older", age_minutes=100)
        BoostedPost.objects.create(
            post_type=BoostedPost.POST_JOB,
            post_id=boosted.pk,
            user=self.plain,
            boost_end=timezone.now() + timedelta(days=7),
        )

        rows = attach_boosts(newest(base_queryset(KIND_JOBS)), KIND_JOBS)
        ordered = order_posts(rows)
        self.assertEqual([j.pk for j in ordered], [old_verified.pk, boosted.pk, newest_plain.pk, older_plain.pk])
        self.assertTrue(ordered[1].is_boosted)
        self.assertFalse(ordered[2].is_boosted)

    def test_expired_boost_is_ignored(self):
        job = make_job(self.plain, "Expired boost")
        BoostedPost.objects.create(
            post_type=BoostedPost.POST_JOB,
            post_id=job.pk,
            user=self.plain,
            boost_start=timezone.now() - timedelta(days=10),
            boost_end=timezone.now() - timedelta(days=3),
        )
        rows = attach_boosts([job], KIND_JOBS)
        self.assertFalse(rows[0].is_boosted)

    def test_newest_caps_rows(self):
        for i in range(5):
            make_job(self.plain, f"Job {i}", age_minutes=i + 1)
        rows = newest(base_queryset(KIND_JOBS), limit=3)
        self.assertEqual([j.title for j in rows], ["Job 0", "Job 1", "Job 2"])

    @override_settings(NGUVU_POSTS_PER_PAGE=4, NGUVU_AD_INTERVAL=2, NGUVU_AD_SLOTS=1)
    def test_build_feed_pages_and_ads(self):
        for i in range(6):
            make_job(self.plain, f"Job {i}", age_minutes=i + 1)
        Ad.objects.create(title="Sponsor")

        feed = build_feed(KIND_JOBS, base_queryset(KIND_JOBS), "2")
        self.assertEqual(feed.page.number, 2)
        self.assertEqual(feed.total_posts, 6)
        self.assertEqual([p.title for p in feed.posts], ["Job 4", "Job 5"])
        self.assertEqual(len(feed.items), 3)
        self.assertTrue(feed.items[2].is_ad)

    @override_settings(NGUVU_POSTS_PER_PAGE=3, NGUVU_BROWSE_LIMIT=7)
    def test_tied_timestamps_page_without_overlap(self):
        jobs = [make_job(self.plain, f"Batch {i}") for i in range(8)]
        Job.objects.update(created_at=timezone.now() - timedelta(hours=1))

        seen = []
        for number in (1, 2, 3):
            feed = build_feed(KIND_JOBS, base_queryset(KIND_JOBS), number, with_ads=False)
            seen.extend(p.pk for p in feed.posts)

        self.assertEqual(len(seen), len(set(seen)))
        # the oldest insert falls outside the cap, the rest come back by descending pk
        self.assertEqual(seen, sorted((j.pk for j in jobs[1:]), reverse=True))

        as_list = newest(list(base_queryset(KIND_JOBS)), limit=7)
        self.assertEqual([p.pk for p in as_list], seen)


class FilterAndRegionTests(TestCase):
    def setUp(self):
        self.employer = make_employer()
        self.kenya_job = make_job(
            self.employer, "Plumber", country="Kenya", preferred_candidate_countries=["Uganda", "Tanzania"]
        )
        self.uae_job = make_job(
            self.employer, "Driver", company="Gulf Haulage", country="United Arab Emirates",
            preferred_candidate_countries=["Kenya"],
        )
        seeker = User.objects.create_user(username="seeker", password="x")
        self.talent = Availability.objects.create(
            name="Achieng", desired_job="Nurse", skills="triage, ICU", country="Kenya",
            location="Qatar", created_by=seeker,
        )

    def test_keyword_and_location(self):
        qs = filter_posts(base_queryset(KIND_JOBS), KIND_JOBS, q="gulf")
        self.assertEqual(list(qs), [self.uae_job])
        qs = filter_posts(base_queryset(KIND_JOBS), KIND_JOBS, location="kenya")
        self.assertEqual(list(qs), [self.kenya_job])
        qs = filter_posts(base_queryset(KIND_TALENT), KIND_TALENT, q="icu")
        self.assertEqual(list(qs), [self.talent])

    def test_jobs_region_to_and_from(self):
        qs = region_filter(base_queryset(KIND_JOBS), KIND_JOBS, to_country="Kenya")
        self.assertEqual(list(qs), [self.kenya_job])
        rows = region_filter(base_queryset(KIND_JOBS), KIND_JOBS, from_country="ug")
        self.assertEqual(rows, [self.kenya_job])
        rows = region_filter(base_queryset(KIND_JOBS), KIND_JOBS, from_country="Kenya", to_country="Kenya")
        self.assertEqual(rows, [])

    def test_jobs_from_scan_stops_at_limit(self):
        recent = [
            make_job(self.employer, f"Picker {i}", country="Qatar", preferred_candidate_countries=["Uganda"], age_minutes=i + 1)
            for i in range(3)
        ]
        rows = region_filter(base_queryset(KIND_JOBS), KIND_JOBS, from_country="Uganda", limit=2)
        self.assertEqual(rows, [self.kenya_job, recent[0]])
        with override_settings(NGUVU_BROWSE_LIMIT=1):
            rows = region_filter(base_queryset(KIND_JOBS), KIND_JOBS, from_country="Uganda")
        self.assertEqual(rows, [self.kenya_job])

    def test_talent_region(self):
        qs = region_filter(base_queryset(KIND_TALENT), KIND_TALENT, from_country="Kenya", to_country="Qatar")
        self.assertEqual(list(qs), [self.talent])
        qs = region_filter(base_queryset(KIND_TALENT), KIND_TALENT, from_country="Uganda")
        self.assertEqual(list(qs), [])


class BrowseViewTests(TestCase):
    def test_tabs_render(self):
        employer = make_employer()
        make_job(employer, "Chef")
        resp = self.client.get(reverse("job_list:browse"))
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Chef")

        resp = self.client.get(reverse("job_list:browse"), {"tab": "services"})
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.context["feed"])

    def test_unknown_tab_falls_back_to_jobs(self):
        resp = self.client.get(reverse("job_list:browse"), {"tab": "nope", "page": "50"})
        self.assertEqual(resp.context["tab"], KIND_JOBS)
        self.assertEqual(resp.context["feed"].page.number, 1)


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class ApplicationFlowTests(TestCase):
    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)

    def setUp(self):
        self.employer = make_employer()
        self.job = make_job(self.employer, "Welder")
        self.seeker = User.objects.create_user(username="applicant", password="x", email="a@example.com")
        self.client.force_login(self.seeker)

    def _apply(self, **files):
        data = {
            "full_name": "Kofi Mensah",
            "email": "a@example.com",
            "phone": "+254700000000",
            "cover_message": "Hello",
            "resume": files.get("resume", pdf("resume.pdf")),
            "cover_letter": files.get("cover_letter", pdf("letter.pdf")),
        }
        return self.client.post(reverse("job_list:apply_to_job", args=[self.job.id]), data)

    def test_apply_creates_application_and_notifies_employer(self):
        resp = self._apply()
        self.assertRedirects(resp, reverse("job_list:job_detail", args=[self.job.id]))
        application = Application.objects.get(job=self.job, applicant=self.seeker)
        self.assertEqual(application.status, "pending")
        note = Notification.objects.get(user=self.employer, type="new_application")
        self.assertIn("Welder", note.message)

    def test_duplicate_application_is_refused(self):
        self._apply()
        self._apply()
        self.assertEqual(Application.objects.filter(job=self.job).count(), 1)

    def test_non_pdf_is_rejected(self):
        bad = SimpleUploadedFile("resume.docx", b"data", content_type="application/msword")
        resp = self._apply(resume=bad)
        self.assertEqual(resp.status_code, 200)
        self.assertIn("resume", resp.context["form"].errors)
        self.assertFalse(Application.objects.exists())

    @override_settings(NGUVU_UPLOAD_MAX_BYTES=50)
    def test_oversized_pdf_is_rejected(self):
        resp = self._apply(cover_letter=pdf("letter.pdf", size=500))
        self.assertIn("cover_letter", resp.context["form"].errors)

    def test_owner_cannot_apply(self):
        self.client.force_login(self.employer)
        self._apply()
        self.assertFalse(Application.objects.exists())

    def test_employer_updates_status_and_applicant_is_notified(self):
        self._apply()
        application = Application.objects.get()
        self.client.force_login(self.employer)

        resp = self.client.get(reverse("job_list:applications"))
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(Notification.objects.filter(user=self.employer, is_read=False).exists())

        resp = self.client.post(
            reverse("job_list:update_application_status", args=[application.id]), {"status": "shortlisted"}
        )
        self.assertRedirects(resp, reverse("job_list:applications"))
        application.refresh_from_db()
        self.assertEqual(application.status, "shortlisted")
        self.assertTrue(Notification.objects.filter(user=self.seeker, type="application_status").exists())

    def test_other_employer_cannot_change_status(self):
        self._apply()
        application = Application.objects.get()
        self.client.force_login(make_employer("rival"))
        resp = self.client.post(
            reverse("job_list:update_application_status", args=[application.id]), {"status": "rejected"}
        )
        self.assertEqual(resp.status_code, 403)


class PostingTests(TestCase):
    def test_job_seeker_cannot_post_job(self):
        seeker = User.objects.create_user(username="nojobs", password="x")
        self.client.force_login(seeker)
        resp = self.client.get(reverse("job_list:post_job"))
        self.assertRedirects(resp, reverse("dashboard:dashboard"), fetch_redirect_response=False)

    def test_employer_posts_job_with_country_lists(self):
        employer = make_employer()
        self.client.force_login(employer)
        resp = self.client.post(reverse("job_list:post_job"), {
            "title": "Site engineer",
            "description": "Build things",
            "country": "Kenya",
            "preferred_candidate_countries": ["Uganda", "Rwanda"],
            "work_location_type": "onsite",
            "remote_work_countries": ["Ghana"],
        })
        job = Job.objects.get(title="Site engineer")
        self.assertRedirects(resp, reverse("job_list:job_detail", args=[job.id]))
        self.assertEqual(job.company, "Acme Ltd")
        self.assertEqual(job.preferred_candidate_countries, ["Uganda", "Rwanda"])
        self.assertEqual(job.remote_work_countries, [])

    def test_seeker_posts_and_deletes_availability(self):
        seeker = User.objects.create_user(username="avail", password="x")
        self.client.force_login(seeker)
        self.client.post(reverse("job_list:post_availability"), {
            "name": "Zawadi",
            "desired_job": "Cook",
            "country": "Tanzania",
            "work_location_type": "remote",
            "remote_work_countries": ["Kenya"],
        })
        availability = Availability.objects.get(created_by=seeker)
        self.assertEqual(availability.remote_work_countries, ["Kenya"])

        other = User.objects.create_user(username="intruder", password="x")
        self.client.force_login(other)
        resp = self.client.post(reverse("job_list:delete_availability", args=[availability.id]))
        self.assertEqual(resp.status_code, 403)

        self.client.force_login(seeker)
        self.client.post(reverse("job_list:delete_availability", args=[availability.id]))
        self.assertFalse(Availability.objects.exists())
