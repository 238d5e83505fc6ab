from __future__ import annotations

import logging
from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from nguvu_hire.billing.models import SubscriptionPlan, UserSubscription
from nguvu_hire.billing.services.boosts import add_credits, get_credits

logger = logging.getLogger(__name__)

CYCLE_DAYS = {
    UserSubscription.CYCLE_MONTHLY: 30,
    UserSubscription.CYCLE_YEARLY: 365,
}


def plans_for(audience: str | None = None):
    qs = SubscriptionPlan.objects.filter(is_active=True)
    if audience:
        qs = qs.filter(audience=audience)
    return qs.order_by("price_monthly", "id")


def serialize_plan(plan: SubscriptionPlan) -> dict:
    return {
        "id": plan.id,
        "name": plan.name,
        "slug": plan.slug,
        "user_type": plan.audience,
        "price_monthly": float(plan.price_monthly),
        "price_yearly": float(plan.price_yearly),
        "boost_credits": plan.boost_credits,
        "max_boost_duration": plan.max_boost_duration,
        "features": list(plan.features or []),
    }


def active_subscription(user):
    now = timezone.now()
    return (
        UserSubscription.objects.filter(user=user, status=UserSubscription.STATUS_ACTIVE)
        .exclude(expires_at__lte=now)
        .select_related("plan")
        .order_by("-started_at", "-id")
        .first()
    )


def activate_plan(user, plan: SubscriptionPlan, billing_cycle: str = UserSubscription.CYCLE_MONTHLY) -> UserSubscription:
    """Cancel any running subscription, start the new one and grant the plan's credits."""
    now = timezone.now()
    with transaction.atomic():
        UserSubscription.objects.filter(
            user=user, status=UserSubscription.STATUS_ACTIVE
        ).update(status=UserSubscription.STATUS_CANCELED)
        subscription = UserSubscription.objects.create(
            user=user,
            plan=plan,
            status=UserSubscription.STATUS_ACTIVE,
            billing_cycle=billing_cycle,
            started_at=now,
            expires_at=now + timedelta(days=CYCLE_DAYS.get(billing_cycle, 30)),
        )
        add_credits(user, plan.boost_credits)
    logger.info("User %s subscribed to %s (%s)", user.pk, plan.slug, billing_cycle)
    return subscription


def subscription_status(user) -> dict:
    """Payload for the status endpoint; anonymous users get an empty shape."""
    if not getattr(user, "is_authenticated", False):
        return {
            "subscription": None,
            "credits": {"credits_available": 0, "credits_used": 0},
        }

    subscription = active_subscription(user)
    credit = get_credits(user)
    sub_payload = None
    if subscription:
        sub_payload = {
            "id": subscription.id,
            "status": subscription.status,
            "billing_cycle": subscription.billing_cycle,
            "started_at": subscription.started_at.isoformat() if subscription.started_at else None,
            "expires_at": subscription.expires_at.isoformat() if subscription.expires_at else None,
            "plan": serialize_plan(subscription.plan),
        }
    return {
        "subscription": sub_payload,
        "credits": {
            "credits_available": credit.credits_available,
            "credits_used": credit.credits_used,
        },
    }
