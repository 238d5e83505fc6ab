from django import forms

from .models import VerificationDocument, VerificationRequest


class StartVerificationForm(forms.Form):
    plan = forms.ChoiceField(choices=VerificationRequest.PLAN_CHOICES, widget=forms.RadioSelect)


class DocumentUploadForm(forms.Form):
    document_type = forms.ChoiceField(choices=VerificationDocument.DOCUMENT_TYPE_CHOICES)
    file = forms.FileField(help_text="JPEG, PNG or PDF, max 5 MB")

