"""
Boost credits and post boosts.

Every boost costs one credit and runs for a fixed number of days by type.
The credit deduction and the BoostedPost insert happen in one transaction.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from nguvu_hire.billing.models import BoostCredit, BoostedPost
from nguvu_hire.job_list.models import Availability, Job

logger = logging.getLogger(__name__)

BOOST_DURATIONS = {
    "standard": 7,
    "premium": 14,
    "ultra": 30,
}
DEFAULT_BOOST_DAYS = 7

POST_MODELS = {
    BoostedPost.POST_JOB: Job,
    BoostedPost.POST_AVAILABILITY: Availability,
}


class BoostError(Exception):
    """Raised when a boost can't be applied; `status` maps to the HTTP response."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


def boost_days(boost_type: str) -> int:
    return BOOST_DURATIONS.get(boost_type, DEFAULT_BOOST_DAYS)


def get_credits(user) -> BoostCredit:
    """Credits row for the user, created with the free allowance on first use."""
    credit, created = BoostCredit.objects.get_or_create(
        user=user,
        defaults={"credits_available": getattr(settings, "NGUVU_FREE_BOOST_CREDITS", 1)},
    )
    if created:
        logger.info("Created boost credits for user %s", user.pk)
    return credit


def add_credits(user, amount: int) -> BoostCredit:
    credit = get_credits(user)
    if amount > 0:
        BoostCredit.objects.filter(pk=credit.pk).update(credits_available=F("credits_available") + amount)
        credit.refresh_from_db()
    return credit


def active_boost(post_type: str, post_id: int):
    return (
        BoostedPost.objects.filter(
            post_type=post_type,
            post_id=post_id,
            is_active=True,
            boost_end__gt=timezone.now(),
        )
        .order_by("-boost_end")
        .first()
    )


def boost_post(user, post_id, post_type: str, boost_type: str = "standard"):
    """
    Boost one of the user's posts. Returns (BoostedPost, credits_remaining).
    Raises BoostError with 404 / 403 / 400 for missing post, wrong owner,
    no credits or an already running boost.
    """
    model = POST_MODELS.get(post_type)
    if model is None:
        raise BoostError("Invalid post type", status=400)
    try:
        post_id = int(post_id)
    except (TypeError, ValueError):
        raise BoostError("Post not found", status=404)

    post = model.objects.filter(pk=post_id).only("id", "created_by_id").first()
    if post is None:
        raise BoostError("Post not found", status=404)
    if post.created_by_id != user.id:
        raise BoostError("You can only boost your own posts", status=403)

    get_credits(user)
    with transaction.atomic():
        credit = BoostCredit.objects.select_for_update().get(user=user)
        if credit.credits_available < 1:
            raise BoostError("Insufficient boost credits", status=400)
        if active_boost(post_type, post_id):
            raise BoostError("Post is already boosted", status=400)

        now = timezone.now()
        if boost_type not in BOOST_DURATIONS:
            boost_type = "standard"
        boost = BoostedPost.objects.create(
            post_type=post_type,
            post_id=post_id,
            user=user,
            boost_type=boost_type,
            credits_used=1,
            boost_start=now,
            boost_end=now + timedelta(days=boost_days(boost_type)),
            is_active=True,
        )
        credit.credits_available -= 1
        credit.credits_used += 1
        credit.save(update_fields=["credits_available", "credits_used", "updated_at"])

    logger.info("User %s boosted %s#%s (%s) until %s", user.pk, post_type, post_id, boost_type, boost.boost_end)
    return boost, credit.credits_available


def expire_boosts(now=None) -> int:
    """Deactivate boosts whose end time has passed; returns how many were touched."""
    now = now or timezone.now()
    return BoostedPost.objects.filter(is_active=True, boost_end__lte=now).update(is_active=False)
