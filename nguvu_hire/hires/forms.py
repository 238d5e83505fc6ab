from django import forms


class HireRequestForm(forms.Form):
    message = forms.CharField(widget=forms.Textarea(attrs={"rows": 4}))
    contact_info = forms.CharField(
        label="Contact information",
        widget=forms.Textarea(attrs={"rows": 2}),
        help_text="How should the candidate reach you? Email, phone, etc.",
    )

    def compose(self):
        return f"{self.cleaned_data['message']}\n\nContact Information:\n{self.cleaned_data['contact_info']}"


class HireResponseForm(forms.Form):
    action = forms.ChoiceField(choices=[("accept", "Accept"), ("reject", "Decline")])
    response = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))
