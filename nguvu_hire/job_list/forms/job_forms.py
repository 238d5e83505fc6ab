from django import forms

from nguvu_hire.core.constants import COUNTRY_CHOICES
from nguvu_hire.job_list.models import Application, Availability, Job
from nguvu_hire.job_list.utils.validators import validate_file_size, validate_pdf


class _CountryListMixin:
    """Render JSON country lists as multi-selects and store plain name lists."""

    list_fields = ()

    def _init_country_lists(self):
        for name in self.list_fields:
            self.fields[name] = forms.MultipleChoiceField(
                choices=COUNTRY_CHOICES,
                required=False,
                widget=forms.SelectMultiple(attrs={"size": 6}),
                label=self._meta.model._meta.get_field(name).verbose_name.capitalize(),
            )
            if self.instance and self.instance.pk:
                self.initial[name] = list(getattr(self.instance, name) or [])


class JobForm(_CountryListMixin, forms.ModelForm):
    list_fields = ("preferred_candidate_countries", "remote_work_countries")
    country = forms.ChoiceField(choices=[("", "Select country")] + COUNTRY_CHOICES)

    class Meta:
        model = Job
        fields = [
            "title", "company", "description", "responsibilities", "requirements",
            "location", "country", "preferred_location", "preferred_candidate_countries",
            "work_location_type", "remote_work_countries", "cover_photo", "deadline",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 5}),
            "responsibilities": forms.Textarea(attrs={"rows": 4}),
            "requirements": forms.Textarea(attrs={"rows": 4}),
            "deadline": forms.DateInput(attrs={"type": "date"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._init_country_lists()

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get("work_location_type") == "onsite":
            cleaned_data["remote_work_countries"] = []
        return cleaned_data


class AvailabilityForm(_CountryListMixin, forms.ModelForm):
    list_fields = ("remote_work_countries",)
    country = forms.ChoiceField(choices=[("", "Select country")] + COUNTRY_CHOICES)

    class Meta:
        model = Availability
        fields = [
            "name", "desired_job", "skills", "location", "country", "availability",
            "description", "cv", "cover_image", "work_location_type", "remote_work_countries",
        ]
        widgets = {"description": forms.Textarea(attrs={"rows": 4})}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._init_country_lists()

    def clean_cv(self):
        cv = self.cleaned_data.get("cv")
        if cv and hasattr(cv, "content_type"):
            validate_pdf(cv)
        return cv

    def clean_cover_image(self):
        image = self.cleaned_data.get("cover_image")
        if image and hasattr(image, "content_type"):
            validate_file_size(image)
        return image


class ApplicationForm(forms.ModelForm):
    resume = forms.FileField(validators=[validate_pdf], help_text="PDF, max 5 MB")
    cover_letter = forms.FileField(validators=[validate_pdf], help_text="PDF, max 5 MB")

    class Meta:
        model = Application
        fields = ["full_name", "email", "phone", "cover_message", "resume", "cover_letter"]
        widgets = {"cover_message": forms.Textarea(attrs={"rows": 4})}


class ApplicationStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Application.STATUS_CHOICES)
