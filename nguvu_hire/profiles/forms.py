from django import forms

from nguvu_hire.core.constants import COUNTRY_CHOICES
from .models import EMPLOYER_TYPE_CHOICES, ROLE_EMPLOYER, ROLE_JOB_SEEKER, Profile


class OnboardingForm(forms.ModelForm):
    role = forms.ChoiceField(
        choices=[(ROLE_JOB_SEEKER, "I'm looking for work"), (ROLE_EMPLOYER, "I'm hiring")],
        widget=forms.RadioSelect,
    )
    employer_type = forms.ChoiceField(choices=[("", "Select...")] + EMPLOYER_TYPE_CHOICES, required=False)
    country = forms.ChoiceField(choices=[("", "Select your country")] + COUNTRY_CHOICES)

    class Meta:
        model = Profile
        fields = ["role", "employer_type", "country"]

    def clean(self):
        cleaned_data = super().clean()
        role = cleaned_data.get("role")
        if role == ROLE_EMPLOYER and not cleaned_data.get("employer_type"):
            self.add_error("employer_type", "Please tell us what kind of employer you are.")
        if role != ROLE_EMPLOYER:
            cleaned_data["employer_type"] = ""
        return cleaned_data


class _BaseProfileForm(forms.ModelForm):
    country = forms.ChoiceField(choices=[("", "Select your country")] + COUNTRY_CHOICES, required=False)


class JobSeekerProfileForm(_BaseProfileForm):
    class Meta:
        model = Profile
        fields = [
            "first_name", "last_name", "username", "bio", "skills", "experience",
            "years_of_experience", "portfolio", "linkedin", "country", "phone_number",
            "profile_picture",
        ]
        widgets = {
            "bio": forms.Textarea(attrs={"rows": 4}),
            "experience": forms.Textarea(attrs={"rows": 4}),
        }

    def clean(self):
        cleaned_data = super().clean()
        for field in ("first_name", "last_name"):
            if not (cleaned_data.get(field) or "").strip():
                self.add_error(field, "This field is required.")
        return cleaned_data


class CompanyProfileForm(_BaseProfileForm):
    class Meta:
        model = Profile
        fields = [
            "company_name", "industry", "company_size", "website", "company_description",
            "first_name", "last_name", "country", "phone_number", "profile_picture",
        ]
        labels = {"first_name": "Contact first name", "last_name": "Contact last name"}
        widgets = {"company_description": forms.Textarea(attrs={"rows": 4})}

    def clean_company_name(self):
        name = (self.cleaned_data.get("company_name") or "").strip()
        if not name:
            raise forms.ValidationError("Company name is required.")
        return name


class AgencyProfileForm(CompanyProfileForm):
    class Meta(CompanyProfileForm.Meta):
        fields = [
            "company_name", "specialization", "industry", "website", "company_description",
            "first_name", "last_name", "country", "phone_number", "profile_picture",
        ]
        labels = {"company_name": "Agency name", "specialization": "Sectors you recruit for"}


class RecruiterProfileForm(_BaseProfileForm):
    class Meta:
        model = Profile
        fields = [
            "first_name", "last_name", "specialization", "years_of_experience", "linkedin",
            "bio", "country", "phone_number", "profile_picture",
        ]
        widgets = {"bio": forms.Textarea(attrs={"rows": 4})}


class FreelancerProfileForm(_BaseProfileForm):
    class Meta:
        model = Profile
        fields = [
            "first_name", "last_name", "services_offered", "skills", "hourly_rate",
            "portfolio", "bio", "country", "phone_number", "profile_picture",
        ]
        widgets = {
            "services_offered": forms.Textarea(attrs={"rows": 3}),
            "bio": forms.Textarea(attrs={"rows": 4}),
        }


EMPLOYER_FORMS = {
    "company": CompanyProfileForm,
    "agency": AgencyProfileForm,
    "recruiter": RecruiterProfileForm,
    "freelancer": FreelancerProfileForm,
}


def profile_form_class(profile):
    """Pick the edit form for a profile's role and employer type."""
    if profile.role == ROLE_EMPLOYER:
        return EMPLOYER_FORMS.get(profile.employer_type, CompanyProfileForm)
    return JobSeekerProfileForm
