from django.shortcuts import get_object_or_404, render

from .models import Ad


def ad_detail(request, ad_id):
    """Modal body for a sponsored card; inactive ads 404."""
    ad = get_object_or_404(Ad, pk=ad_id, is_active=True)
    return render(request, "ads/ad_detail.html", {"ad": ad})
