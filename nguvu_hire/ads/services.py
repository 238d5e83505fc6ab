from __future__ import annotations

from .models import Ad


def active_ads(limit: int | None = 3) -> list[Ad]:
    """Newest active ads, capped at `limit` (None for all)."""
    qs = Ad.objects.filter(is_active=True).order_by("-created_at", "-id")
    if limit is not None:
        if limit <= 0:
            return []
        qs = qs[:limit]
    return list(qs)
