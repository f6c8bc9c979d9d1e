from django.conf import settings
from django.contrib.auth import login as auth_login
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.views.generic.edit import FormView

from feed.forms import SignUpForm
from feed.views.decorators import LoginProhibitedMixin


class SignUpView(LoginProhibitedMixin, FormView):
    """
    Handles user registration via the custom SignUpForm.
    """

    template_name = "auth/sign_up.html"
    form_class = SignUpForm
    success_url = reverse_lazy(settings.REDIRECT_URL_WHEN_LOGGED_IN)
    redirect_when_logged_in_url = settings.REDIRECT_URL_WHEN_LOGGED_IN

    def form_valid(self, form):
        user = form.save()
        auth_login(
            self.request,
            user,
            backend="django.contrib.auth.backends.ModelBackend",
        )
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        return render(self.request, self.template_name, {"form": form}, status=422)
