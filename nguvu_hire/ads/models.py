from django.db import models


class Ad(models.Model):
    """Sponsored card shown between listings on the browse page and dashboard."""

    AD_TYPE_CHOICES = [
        ("image", "Image"),
        ("video", "Video"),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True, help_text="Image or video URL")
    ad_type = models.CharField(max_length=10, choices=AD_TYPE_CHOICES, default="image")
    target_url = models.URLField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    @property
    def is_video(self):
        return self.ad_type == "video"
