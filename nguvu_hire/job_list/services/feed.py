"""
Listing feed used by the browse page and the dashboard.

Pipeline: filter -> cap to the newest rows -> attach boosts -> order
(verified owners, boosted, newest) -> paginate -> interleave ads.
A page costs a fixed number of queries regardless of its size.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from django.conf import settings
from django.core.paginator import Page, Paginator
from django.db.models import Q, QuerySet
from django.utils import timezone

from nguvu_hire.ads.services import active_ads
from nguvu_hire.billing.models import BoostedPost
from nguvu_hire.job_list.models import Availability, Job

KIND_JOBS = "jobs"
KIND_TALENT = "talent"

POST_TYPE_FOR_KIND = {
    KIND_JOBS: BoostedPost.POST_JOB,
    KIND_TALENT: BoostedPost.POST_AVAILABILITY,
}

_KEYWORD_FIELDS = {
    KIND_JOBS: ("title", "description", "company"),
    KIND_TALENT: ("desired_job", "skills", "name"),
}


@dataclass
class FeedItem:
    kind: str  # "post" | "ad"
    obj: Any

    @property
    def is_ad(self) -> bool:
        return self.kind == "ad"


@dataclass
class FeedPage:
    page: Page
    items: list[FeedItem] = field(default_factory=list)
    window: list[int | None] = field(default_factory=list)
    total_posts: int = 0

    @property
    def posts(self) -> list:
        return [item.obj for item in self.items if not item.is_ad]


def _setting(name: str, default: int) -> int:
    return int(getattr(settings, name, default))


# =========================
# Querying
# =========================
def base_queryset(kind: str) -> QuerySet:
    model = Job if kind == KIND_JOBS else Availability
    return model.objects.select_related("created_by", "created_by__profile")


def filter_posts(qs: QuerySet, kind: str, q: str = "", location: str = "") -> QuerySet:
    """Case-insensitive substring match on the kind's keyword fields and on location/country."""
    q = (q or "").strip()
    location = (location or "").strip()
    if q:
        cond = Q()
        for name in _KEYWORD_FIELDS[kind]:
            cond |= Q(**{f"{name}__icontains": q})
        qs = qs.filter(cond)
    if location:
        qs = qs.filter(Q(location__icontains=location) | Q(country__icontains=location))
    return qs


def newest(posts: Iterable, limit: int | None = None) -> list:
    """Cap to the newest `limit` rows; accepts a queryset or an already-filtered list."""
    limit = _setting("NGUVU_BROWSE_LIMIT", 100) if limit is None else limit
    if isinstance(posts, QuerySet):
        return list(posts.order_by("-created_at", "-pk")[:limit])
    ordered = sorted(posts, key=lambda p: (p.created_at, p.pk), reverse=True)
    return ordered[:limit]


# =========================
# Enrichment + ordering
# =========================
def attach_boosts(posts: Sequence, kind: str) -> Sequence:
    """Set `boost_end` / `is_boosted` on each post from a single BoostedPost query."""
    ids = [p.pk for p in posts]
    boost_map = {}
    if ids:
        rows = (
            BoostedPost.objects.filter(
                post_type=POST_TYPE_FOR_KIND[kind],
                post_id__in=ids,
                is_active=True,
                boost_end__gt=timezone.now(),
            )
            .order_by("boost_end")
            .values_list("post_id", "boost_end")
        )
        # latest end wins when a post somehow has overlapping boosts
        boost_map = {post_id: end for post_id, end in rows}
    for post in posts:
        post.boost_end = boost_map.get(post.pk)
        post.is_boosted = post.boost_end is not None
    return posts


def _owner_verified(post) -> bool:
    profile = getattr(post.created_by, "profile", None)
    return bool(profile and profile.is_verified)


def order_posts(posts: Iterable) -> list:
    """Verified owners first, then boosted posts, then newest; pk breaks ties so pages never overlap."""
    return sorted(
        posts,
        key=lambda p: (_owner_verified(p), getattr(p, "is_boosted", False), p.created_at, p.pk),
        reverse=True,
    )


# =========================
# Pagination + ads
# =========================
def page_window(current: int, total: int) -> list[int | None]:
    """
    Page links for the paginator; None marks a gap.
    <= 7 pages: all of them. Otherwise first and last are always shown
    around a block of five (at either end) or three (in the middle).
    """
    if total <= 0:
        return [1]
    current = max(1, min(current, total))
    if total <= 7:
        return list(range(1, total + 1))
    if current <= 4:
        return [1, 2, 3, 4, 5, None, total]
    if current >= total - 3:
        return [1, None] + list(range(total - 4, total + 1))
    return [1, None, current - 1, current, current + 1, None, total]


def interleave_ads(posts: Sequence, ads: Sequence, interval: int | None = None) -> list[FeedItem]:
    """Insert every ad after each `interval`-th post; no ads or interval <= 0 means posts only."""
    interval = _setting("NGUVU_AD_INTERVAL", 9) if interval is None else interval
    items: list[FeedItem] = []
    for index, post in enumerate(posts, start=1):
        items.append(FeedItem("post", post))
        if ads and interval > 0 and index % interval == 0:
            items.extend(FeedItem("ad", ad) for ad in ads)
    return items


def paginate(posts: Sequence, page_number, per_page: int | None = None) -> FeedPage:
    per_page = _setting("NGUVU_POSTS_PER_PAGE", 12) if per_page is None else per_page
    paginator = Paginator(posts, max(per_page, 1), allow_empty_first_page=True)
    # get_page clamps junk and out-of-range values to a real page
    page = paginator.get_page(page_number)
    return FeedPage(
        page=page,
        window=page_window(page.number, paginator.num_pages),
        total_posts=paginator.count,
    )


def build_feed(kind: str, posts: Iterable, page_number=1, *, with_ads: bool = True) -> FeedPage:
    """Full pipeline over already-filtered posts (queryset or list)."""
    rows = newest(posts)
    attach_boosts(rows, kind)
    feed = paginate(order_posts(rows), page_number)
    ads = active_ads(_setting("NGUVU_AD_SLOTS", 3)) if with_ads else []
    feed.items = interleave_ads(list(feed.page.object_list), ads)
    return feed


def preserved_query(params) -> str:
    """Current GET params minus `page`, ready to prefix a page number in links."""
    query = params.copy()
    query.pop("page", None)
    encoded = query.urlencode()
    return f"{encoded}&" if encoded else ""
