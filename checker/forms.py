from django import forms
from django.conf import settings
from django.core.validators import MaxLengthValidator


class PasswordCheckForm(forms.Form):
    password = forms.CharField(
        required=False,
        strip=False,
        widget=forms.TextInput(
            attrs={
                "autocapitalize": "none",
                "autocomplete": "off",
                "spellcheck": "false",
                "class": "password-input",
            }
        ),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        limit = settings.PASSWORD_CHECKER.get("MAX_PASSWORD_LENGTH", 256)
        field = self.fields["password"]
        field.max_length = limit
        field.validators.append(MaxLengthValidator(limit))
        field.widget.attrs["maxlength"] = str(limit)
