"""Forms for profile editing and signup."""

from django import forms
from django.core.validators import RegexValidator

from feed.forms.fields import StringEmailField, StringField
from feed.models import User
from feed.repos.user_repo import UserRepo

user_repo = UserRepo()


class ProfileForm(forms.ModelForm):
    """Form to update the display name and email of a user."""
    name = StringField(max_length=255)
    email = StringEmailField(max_length=255)

    class Meta:
        """Model/field config for the profile form."""
        model = User
        fields = ['name', 'email']

    def clean_email(self):
        """Reject an email already used by another account."""
        email = self.cleaned_data["email"]
        if user_repo.email_taken(email, exclude_user_id=self.instance.pk):
            raise forms.ValidationError("The email has already been taken.")
        return email


PASSWORD_RULE = RegexValidator(
    regex=r'^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9]).*$',
    message='Password must contain an uppercase character, a lowercase character, and a number',
)


class NewPasswordMixin(forms.Form):
    """Password plus confirmation, checked against each other."""
    new_password = forms.CharField(label='Password', widget=forms.PasswordInput(), validators=[PASSWORD_RULE])
    password_confirmation = forms.CharField(label='Password confirmation', widget=forms.PasswordInput())

    def clean(self):
        cleaned_data = super().clean()
        password = cleaned_data.get('new_password')
        if password and password != cleaned_data.get('password_confirmation'):
            self.add_error('password_confirmation', 'Confirmation does not match password.')
        return cleaned_data


class SignUpForm(NewPasswordMixin, forms.ModelForm):
    """Form to register a new user."""
    class Meta:
        """Model/field config for signup form."""
        model = User
        fields = ['username', 'name', 'email']

    def clean_email(self):
        email = self.cleaned_data["email"]
        if user_repo.email_taken(email):
            raise forms.ValidationError("The email has already been taken.")
        return email

    def save(self):
        """Create and return a new User."""
        super().save(commit=False)
        return User.objects.create_user(
            self.cleaned_data.get('username'),
            name=self.cleaned_data.get('name'),
            email=self.cleaned_data.get('email'),
            password=self.cleaned_data.get('new_password'),
        )
