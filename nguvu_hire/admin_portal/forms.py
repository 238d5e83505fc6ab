from django import forms

from nguvu_hire.ads.models import Ad
from nguvu_hire.profiles.models import ROLE_CHOICES

BROADCAST_TARGETS = [
    ("all", "All users"),
    ("job_seeker", "Job seekers"),
    ("employer", "Employers"),
]


class AdForm(forms.ModelForm):
    class Meta:
        model = Ad
        fields = ["title", "description", "image_url", "ad_type", "target_url", "is_active"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class RoleForm(forms.Form):
    role = forms.ChoiceField(choices=ROLE_CHOICES)


class ReviewNotesForm(forms.Form):
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))


class BroadcastForm(forms.Form):
    target = forms.ChoiceField(choices=BROADCAST_TARGETS)
    title = forms.CharField(max_length=200)
    message = forms.CharField(widget=forms.Textarea(attrs={"rows": 4}))
