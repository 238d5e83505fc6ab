from django.test import TestCase
from django.urls import reverse

from nguvu_hire.ads.models import Ad
from nguvu_hire.ads.services import active_ads


class ActiveAdsTests(TestCase):
    def test_only_active_newest_first_and_capped(self):
        Ad.objects.create(title="Old")
        Ad.objects.create(title="Hidden", is_active=False)
        for i in range(3):
            Ad.objects.create(title=f"New {i}")

        ads = active_ads(3)
        self.assertEqual([a.title for a in ads], ["New 2", "New 1", "New 0"])
        self.assertEqual(active_ads(0), [])
        self.assertEqual(len(active_ads(None)), 4)

    def test_detail_hides_inactive(self):
        live = Ad.objects.create(title="Live")
        off = Ad.objects.create(title="Off", is_active=False)
        self.assertEqual(self.client.get(reverse("ads:ad_detail", args=[live.id])).status_code, 200)
        self.assertEqual(self.client.get(reverse("ads:ad_detail", args=[off.id])).status_code, 404)
