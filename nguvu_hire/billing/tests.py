import json
from datetime import timedelta
from decimal import Decimal
from io import StringIO

from django.contrib.auth.models import User
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from nguvu_hire.billing.models import BoostCredit, BoostedPost, Payment, SubscriptionPlan, UserSubscription
from nguvu_hire.billing.services.boosts import BoostError, add_credits, boost_post, expire_boosts, get_credits
from nguvu_hire.billing.services.payments import (
    PaymentError,
    complete_payment,
    create_boost_payment,
    create_subscription_payment,
    create_verification_payment,
    fail_payment,
)
from nguvu_hire.billing.services.subscriptions import activate_plan, subscription_status
from nguvu_hire.dashboard.models import Notification
from nguvu_hire.job_list.models import Availability, Job
from nguvu_hire.verification.models import VerificationRequest


def make_plan(slug="pro", price="19", credits=5, audience="job_seeker"):
    return SubscriptionPlan.objects.create(
        name=slug.title(),
        slug=slug,
        audience=audience,
        price_monthly=Decimal(price),
        price_yearly=Decimal(price) * 10,
        boost_credits=credits,
    )


class BoostServiceTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="booster", password="x")
        self.job = Job.objects.create(title="Boost me", description="d", created_by=self.user)

    def test_first_use_grants_free_credit(self):
        self.assertEqual(get_credits(self.user).credits_available, 1)

    def test_boost_spends_credit_and_sets_end(self):
        boost, remaining = boost_post(self.user, self.job.id, BoostedPost.POST_JOB, "premium")
        self.assertEqual(remaining, 0)
        self.assertEqual((boost.boost_end - boost.boost_start).days, 14)
        credit = BoostCredit.objects.get(user=self.user)
        self.assertEqual(credit.credits_used, 1)

    def test_unknown_boost_type_defaults_to_standard(self):
        boost, _ = boost_post(self.user, self.job.id, BoostedPost.POST_JOB, "mega")
        self.assertEqual(boost.boost_type, "standard")
        self.assertEqual((boost.boost_end - boost.boost_start).days, 7)

    def test_errors(self):
        other = User.objects.create_user(username="other", password="x")
        with self.assertRaises(BoostError) as ctx:
            boost_post(other, self.job.id, BoostedPost.POST_JOB)
        self.assertEqual(ctx.exception.status, 403)

        with self.assertRaises(BoostError) as ctx:
            boost_post(self.user, 99999, BoostedPost.POST_JOB)
        self.assertEqual(ctx.exception.status, 404)

        with self.assertRaises(BoostError) as ctx:
            boost_post(self.user, self.job.id, "service")
        self.assertEqual(ctx.exception.status, 400)

    def test_no_credits_and_double_boost(self):
        boost_post(self.user, self.job.id, BoostedPost.POST_JOB)
        with self.assertRaisesMessage(BoostError, "Insufficient boost credits"):
            boost_post(self.user, self.job.id, BoostedPost.POST_JOB)

        add_credits(self.user, 2)
        with self.assertRaisesMessage(BoostError, "Post is already boosted"):
            boost_post(self.user, self.job.id, BoostedPost.POST_JOB)
        self.assertEqual(get_credits(self.user).credits_available, 2)

    def test_expire_boosts(self):
        BoostedPost.objects.create(
            post_type=BoostedPost.POST_JOB,
            post_id=self.job.id,
            user=self.user,
            boost_start=timezone.now() - timedelta(days=8),
            boost_end=timezone.now() - timedelta(days=1),
        )
        self.assertEqual(expire_boosts(), 1)
        self.assertFalse(BoostedPost.objects.filter(is_active=True).exists())


class BoostEndpointTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="poster", password="x")
        self.availability = Availability.objects.create(name="Poster", desired_job="Tailor", created_by=self.user)
        self.url = reverse("billing:boost_post")

    def _post(self, payload):
        return self.client.post(self.url, data=json.dumps(payload), content_type="application/json")

    def test_anonymous_is_unauthorized(self):
        resp = self._post({"postId": self.availability.id, "postType": "availability"})
        self.assertEqual(resp.status_code, 401)

    def test_success_payload(self):
        self.client.force_login(self.user)
        resp = self._post({"postId": self.availability.id, "postType": "availability", "boostType": "ultra"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["creditsRemaining"], 0)
        self.assertIn("boostEnd", body)

    def test_error_statuses(self):
        self.client.force_login(self.user)
        self.assertEqual(self._post({"postId": 424242, "postType": "availability"}).status_code, 404)
        resp = self.client.post(self.url, data="{not json", content_type="application/json")
        self.assertEqual(resp.status_code, 400)

        self.client.force_login(User.objects.create_user(username="thief", password="x"))
        self.assertEqual(self._post({"postId": self.availability.id, "postType": "availability"}).status_code, 403)

    def test_malformed_bodies_are_bad_requests(self):
        self.client.force_login(self.user)
        resp = self._post([1, 2])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Invalid JSON"})

        resp = self._post({"postId": self.availability.id, "postType": 5})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Invalid post type"})

        resp = self._post({"postId": self.availability.id, "postType": "availability", "boostType": ["ultra"]})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(BoostedPost.objects.get().boost_type, "standard")

    def test_form_encoded_body(self):
        self.client.force_login(self.user)
        resp = self.client.post(self.url, {"postId": self.availability.id, "postType": "availability"})
        self.assertEqual(resp.status_code, 200)


class SubscriptionTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="subscriber", password="x")

    def test_anonymous_status_shape(self):
        resp = self.client.get(reverse("billing:status"))
        self.assertEqual(resp.json(), {
            "subscription": None,
            "credits": {"credits_available": 0, "credits_used": 0},
        })

    def test_activate_replaces_previous_plan(self):
        basic = make_plan("basic", price="0", credits=1)
        pro = make_plan("pro", credits=5)
        first = activate_plan(self.user, basic)
        activate_plan(self.user, pro, UserSubscription.CYCLE_YEARLY)

        first.refresh_from_db()
        self.assertEqual(first.status, UserSubscription.STATUS_CANCELED)
        status = subscription_status(self.user)
        self.assertEqual(status["subscription"]["plan"]["slug"], "pro")
        self.assertEqual(status["subscription"]["billing_cycle"], "yearly")
        # free allowance + 1 + 5
        self.assertEqual(status["credits"]["credits_available"], 7)

    def test_plans_json_filters_by_audience(self):
        make_plan("seeker-pro")
        make_plan("employer-pro", audience="employer")
        resp = self.client.get(reverse("billing:plans"), {"type": "employer"})
        self.assertEqual([p["slug"] for p in resp.json()["plans"]], ["employer-pro"])

    def test_seed_plans_is_idempotent(self):
        out = StringIO()
        call_command("seed_plans", stdout=out)
        self.assertIn("6 created", out.getvalue())
        out = StringIO()
        call_command("seed_plans", stdout=out)
        self.assertIn("0 created, 6 updated", out.getvalue())
        self.assertEqual(SubscriptionPlan.objects.filter(audience="employer").count(), 3)

    def test_expire_boosts_command(self):
        out = StringIO()
        call_command("expire_boosts", stdout=out)
        self.assertIn("Deactivated 0", out.getvalue())


class PaymentTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="payer", password="x")

    def test_reference_format(self):
        payment = create_boost_payment(self.user, "boost_5")
        self.assertTrue(payment.reference.startswith("NGUVU-BOOST-"))
        self.assertEqual(payment.amount, Decimal("12.99"))
        self.assertEqual(payment.status, Payment.STATUS_PENDING)

    def test_unknown_items_raise(self):
        with self.assertRaises(PaymentError):
            create_boost_payment(self.user, "boost_99")
        with self.assertRaises(PaymentError):
            create_verification_payment(self.user, "gold")
        with self.assertRaises(PaymentError):
            create_subscription_payment(self.user, make_plan(), "weekly")

    def test_completing_boost_pack_adds_credits_once(self):
        payment = create_boost_payment(self.user, "boost_10")
        complete_payment(payment)
        complete_payment(payment)
        self.assertEqual(get_credits(self.user).credits_available, 11)
        payment.refresh_from_db()
        self.assertEqual(payment.status, Payment.STATUS_COMPLETED)
        self.assertIsNotNone(payment.completed_at)
        self.assertEqual(Notification.objects.filter(user=self.user, type="payment_completed").count(), 1)

    def test_completing_subscription_activates_plan(self):
        payment = create_subscription_payment(self.user, make_plan(), "monthly")
        complete_payment(payment)
        subscription = UserSubscription.objects.get(user=self.user)
        self.assertTrue(subscription.is_current)

    def test_completing_verification_opens_request(self):
        payment = create_verification_payment(self.user, "premium_verification")
        complete_payment(payment)
        vrequest = VerificationRequest.objects.get(payment=payment)
        self.assertEqual(vrequest.plan, "premium_verification")
        self.assertEqual(vrequest.status, VerificationRequest.STATUS_PENDING)

    def test_failed_payment_cannot_complete(self):
        payment = fail_payment(create_boost_payment(self.user, "boost_1"), "card declined")
        self.assertEqual(payment.metadata["failure_reason"], "card declined")
        with self.assertRaises(PaymentError):
            complete_payment(payment)


class CheckoutViewTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="shopper", password="x")
        self.client.force_login(self.user)

    def test_free_plan_activates_directly(self):
        make_plan("starter", price="0", credits=1)
        resp = self.client.post(reverse("billing:checkout"), {"type": "subscription", "plan": "starter", "cycle": "monthly"})
        self.assertRedirects(resp, reverse("billing:pricing"), fetch_redirect_response=False)
        self.assertFalse(Payment.objects.exists())
        self.assertTrue(UserSubscription.objects.filter(user=self.user, status="active").exists())

    def test_paid_plan_creates_pending_payment(self):
        make_plan("pro")
        resp = self.client.get(reverse("billing:checkout"), {"type": "subscription", "plan": "pro", "cycle": "yearly"})
        self.assertContains(resp, "190")
        resp = self.client.post(reverse("billing:checkout"), {"type": "subscription", "plan": "pro", "cycle": "yearly"})
        payment = Payment.objects.get()
        self.assertRedirects(resp, reverse("billing:payment_status", args=[payment.reference]))
        self.assertEqual(payment.amount, Decimal("190"))

    def test_unknown_selection_goes_back_to_pricing(self):
        resp = self.client.get(reverse("billing:checkout"), {"type": "boost", "plan": "nope"})
        self.assertRedirects(resp, reverse("billing:pricing"), fetch_redirect_response=False)

    def test_payment_status_is_private(self):
        other = User.objects.create_user(username="nosy", password="x")
        payment = create_boost_payment(other, "boost_1")
        resp = self.client.get(reverse("billing:payment_status", args=[payment.reference]))
        self.assertRedirects(resp, reverse("billing:pricing"), fetch_redirect_response=False)

    def test_pricing_page_renders(self):
        make_plan("pro")
        resp = self.client.get(reverse("billing:pricing"))
        self.assertContains(resp, "Pro")
