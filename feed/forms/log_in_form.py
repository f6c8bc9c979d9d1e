from django import forms
from django.contrib.auth import authenticate


class LogInForm(forms.Form):
    """Username/password form checked against Django's auth backends."""
    username = forms.CharField(label="Username")
    password = forms.CharField(label="Password", widget=forms.PasswordInput())

    def get_user(self):
        """Return the matching active user, or None when the credentials are wrong."""
        if not self.is_valid():
            return None
        return authenticate(
            username=self.cleaned_data["username"],
            password=self.cleaned_data["password"],
        )
