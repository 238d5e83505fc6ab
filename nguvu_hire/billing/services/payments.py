"""
Payment ledger.

Checkout creates a pending Payment with a unique NGUVU-<TYPE>-<uuid>
reference. Completing it applies the purchase once: a subscription plan,
a boost credit pack or a verification request.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from nguvu_hire.billing.models import Payment, SubscriptionPlan, UserSubscription
from nguvu_hire.billing.services.boosts import add_credits
from nguvu_hire.billing.services.subscriptions import activate_plan
from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.dashboard.services.notifications import notify
from nguvu_hire.verification.models import VerificationRequest

logger = logging.getLogger(__name__)

VERIFICATION_PLANS = {
    "basic_verification": {"name": "Basic Verification", "price": Decimal("9.99")},
    "premium_verification": {"name": "Premium Verification", "price": Decimal("19.99")},
}

BOOST_PACKS = {
    "boost_1": {"name": "1 Boost Credit", "credits": 1, "price": Decimal("2.99")},
    "boost_5": {"name": "5 Boost Credits", "credits": 5, "price": Decimal("12.99")},
    "boost_10": {"name": "10 Boost Credits", "credits": 10, "price": Decimal("22.99")},
}


class PaymentError(Exception):
    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


def make_reference(payment_type: str) -> str:
    return f"NGUVU-{payment_type.upper()}-{uuid.uuid4()}"


def _currency():
    return getattr(settings, "NGUVU_PAYMENT_CURRENCY", "USD")


def _create(user, payment_type, amount, description, **extra) -> Payment:
    payment = Payment.objects.create(
        user=user,
        payment_type=payment_type,
        reference=make_reference(payment_type),
        amount=amount,
        currency=_currency(),
        description=description,
        **extra,
    )
    logger.info("Payment %s created for user %s (%s %s)", payment.reference, user.pk, amount, payment.currency)
    track_event(event_type="payment_created", user=user, metadata={"reference": payment.reference})
    return payment


# =========================
# Checkout
# =========================
def create_subscription_payment(user, plan: SubscriptionPlan, billing_cycle: str) -> Payment:
    if billing_cycle not in dict(UserSubscription.CYCLE_CHOICES):
        raise PaymentError("Invalid billing cycle")
    if not plan.is_active:
        raise PaymentError("This plan is not available", status=404)
    return _create(
        user,
        Payment.TYPE_SUBSCRIPTION,
        plan.price_for(billing_cycle),
        f"{plan.name} ({billing_cycle})",
        plan=plan,
        metadata={"billing_cycle": billing_cycle},
    )


def create_verification_payment(user, plan_key: str) -> Payment:
    plan = VERIFICATION_PLANS.get(plan_key)
    if plan is None:
        raise PaymentError("Unknown verification plan")
    return _create(
        user,
        Payment.TYPE_VERIFICATION,
        plan["price"],
        plan["name"],
        metadata={"verification_plan": plan_key},
    )


def create_boost_payment(user, pack_key: str) -> Payment:
    pack = BOOST_PACKS.get(pack_key)
    if pack is None:
        raise PaymentError("Unknown boost pack")
    return _create(
        user,
        Payment.TYPE_BOOST,
        pack["price"],
        pack["name"],
        metadata={"pack": pack_key, "credits": pack["credits"]},
    )


# =========================
# Settlement
# =========================
def _apply(payment: Payment):
    if payment.payment_type == Payment.TYPE_SUBSCRIPTION:
        if payment.plan is None:
            raise PaymentError("Payment has no plan attached")
        cycle = (payment.metadata or {}).get("billing_cycle", UserSubscription.CYCLE_MONTHLY)
        activate_plan(payment.user, payment.plan, cycle)
    elif payment.payment_type == Payment.TYPE_BOOST:
        add_credits(payment.user, int((payment.metadata or {}).get("credits", 0)))
    elif payment.payment_type == Payment.TYPE_VERIFICATION:
        VerificationRequest.objects.get_or_create(
            payment=payment,
            defaults={
                "user": payment.user,
                "plan": (payment.metadata or {}).get("verification_plan", "basic_verification"),
            },
        )


def complete_payment(payment: Payment) -> Payment:
    """Mark a pending payment completed and apply it. Completed payments are left alone."""
    with transaction.atomic():
        payment = Payment.objects.select_for_update().select_related("plan", "user").get(pk=payment.pk)
        if payment.status == Payment.STATUS_COMPLETED:
            return payment
        if payment.status == Payment.STATUS_FAILED:
            raise PaymentError("Failed payments can't be completed")
        _apply(payment)
        payment.status = Payment.STATUS_COMPLETED
        payment.completed_at = timezone.now()
        payment.save(update_fields=["status", "completed_at"])

    logger.info("Payment %s completed", payment.reference)
    track_event(event_type="payment_completed", user=payment.user, metadata={"reference": payment.reference})
    notify(
        payment.user,
        title="Payment received",
        message=f"Your payment of {payment.amount} {payment.currency} for {payment.description} was successful.",
        type="payment_completed",
        related_id=payment.id,
    )
    return payment


def fail_payment(payment: Payment, reason: str = "") -> Payment:
    if payment.status == Payment.STATUS_COMPLETED:
        raise PaymentError("Completed payments can't be failed")
    payment.status = Payment.STATUS_FAILED
    if reason:
        payment.metadata = {**(payment.metadata or {}), "failure_reason": reason}
    payment.save(update_fields=["status", "metadata"])
    logger.info("Payment %s marked failed", payment.reference)
    return payment
