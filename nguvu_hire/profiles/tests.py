from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from nguvu_hire.core.models import AnalyticsEvent
from nguvu_hire.profiles.forms import (
    AgencyProfileForm,
    CompanyProfileForm,
    JobSeekerProfileForm,
    OnboardingForm,
    profile_form_class,
)
from nguvu_hire.profiles.models import ROLE_EMPLOYER, ROLE_JOB_SEEKER, Profile, get_role, is_employer
from nguvu_hire.profiles.templatetags.profile_extras import display_name, initials


class ProfileSignalTests(TestCase):
    def test_profile_created_with_user_names(self):
        user = User.objects.create_user(username="amina", password="x", first_name="Amina", last_name="Otieno")
        profile = user.profile
        self.assertEqual(profile.role, ROLE_JOB_SEEKER)
        self.assertEqual(profile.full_name, "Amina Otieno")
        self.assertEqual(profile.username, "amina")
        self.assertTrue(AnalyticsEvent.objects.filter(user=user, event_type="profile_created").exists())

    def test_update_is_tracked(self):
        user = User.objects.create_user(username="juma", password="x")
        user.profile.bio = "Electrician"
        user.profile.save()
        self.assertTrue(AnalyticsEvent.objects.filter(user=user, event_type="profile_updated").exists())


class ProfileModelTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="acme", password="x")
        self.profile = self.user.profile

    def test_display_name_prefers_company_for_employers(self):
        self.profile.first_name = "Grace"
        self.profile.company_name = "Acme Ltd"
        self.assertEqual(self.profile.display_name, "Grace")
        self.profile.role = ROLE_EMPLOYER
        self.assertEqual(self.profile.display_name, "Acme Ltd")

    def test_display_name_falls_back_to_user(self):
        self.profile.first_name = ""
        self.profile.last_name = ""
        self.assertEqual(self.profile.display_name, "User")

    def test_mark_verified(self):
        self.profile.mark_verified()
        self.profile.refresh_from_db()
        self.assertTrue(self.profile.is_verified)
        self.assertIsNotNone(self.profile.verified_at)

    def test_country_code_and_skills(self):
        self.profile.country = "Kenya"
        self.profile.skills = "welding, , plumbing "
        self.assertEqual(self.profile.country_code, "KE")
        self.assertEqual(self.profile.skill_list, ["welding", "plumbing"])

    def test_role_helpers(self):
        from django.contrib.auth.models import AnonymousUser

        self.assertEqual(get_role(AnonymousUser()), "")
        self.assertFalse(is_employer(self.user))
        self.profile.role = ROLE_EMPLOYER
        self.profile.save()
        self.user.refresh_from_db()
        self.assertTrue(is_employer(User.objects.get(pk=self.user.pk)))


class ProfileFormTests(TestCase):
    def setUp(self):
        self.profile = User.objects.create_user(username="form_user", password="x").profile

    def test_employer_needs_employer_type(self):
        form = OnboardingForm({"role": ROLE_EMPLOYER, "country": "Kenya"}, instance=self.profile)
        self.assertFalse(form.is_valid())
        self.assertIn("employer_type", form.errors)

    def test_job_seeker_clears_employer_type(self):
        form = OnboardingForm(
            {"role": ROLE_JOB_SEEKER, "employer_type": "agency", "country": "Kenya"}, instance=self.profile
        )
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["employer_type"], "")

    def test_form_class_follows_role(self):
        self.assertIs(profile_form_class(self.profile), JobSeekerProfileForm)
        self.profile.role = ROLE_EMPLOYER
        self.profile.employer_type = "agency"
        self.assertIs(profile_form_class(self.profile), AgencyProfileForm)
        self.profile.employer_type = ""
        self.assertIs(profile_form_class(self.profile), CompanyProfileForm)

    def test_company_name_required(self):
        form = CompanyProfileForm({"company_name": "  "}, instance=self.profile)
        self.assertFalse(form.is_valid())
        self.assertIn("company_name", form.errors)


class ProfileViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="viewer", password="x")
        self.client.force_login(self.user)

    def test_onboarding_sets_role_and_country(self):
        resp = self.client.post(reverse("profiles:onboarding"), {
            "role": ROLE_EMPLOYER,
            "employer_type": "company",
            "country": "Uganda",
        })
        self.assertRedirects(resp, reverse("profiles:edit_profile"))
        profile = Profile.objects.get(user=self.user)
        self.assertEqual(profile.role, ROLE_EMPLOYER)
        self.assertEqual(profile.employer_type, "company")
        self.assertEqual(profile.country, "Uganda")

    def test_edit_profile_saves(self):
        resp = self.client.post(reverse("profiles:edit_profile"), {
            "first_name": "Wanjiru",
            "last_name": "Kamau",
            "username": "wanjiru",
            "skills": "nursing",
            "country": "Kenya",
        })
        self.assertRedirects(resp, reverse("profiles:my_profile"))
        self.assertEqual(Profile.objects.get(user=self.user).full_name, "Wanjiru Kamau")

    def test_public_profile_records_view(self):
        other = User.objects.create_user(username="other", password="x")
        resp = self.client.get(reverse("profiles:public_profile", args=[other.pk]))
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(AnalyticsEvent.objects.filter(event_type="profile_view", user=self.user).exists())

    def test_inactive_profile_hidden(self):
        other = User.objects.create_user(username="gone", password="x")
        other.profile.is_active = False
        other.profile.save()
        resp = self.client.get(reverse("profiles:public_profile", args=[other.pk]))
        self.assertRedirects(resp, reverse("main:home"), fetch_redirect_response=False)


class ProfileTemplateTagTests(TestCase):
    def test_display_name_and_initials(self):
        user = User.objects.create_user(username="tag", password="x", first_name="Baraka", last_name="Mwangi")
        self.assertEqual(display_name(user), "Baraka Mwangi")
        self.assertEqual(initials("Baraka Mwangi"), "BM")
        self.assertEqual(initials(""), "U")
