import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.decorators.cache import never_cache

from feed.forms import LogInForm
from feed.views.decorators import LoginProhibitedMixin

logger = logging.getLogger(__name__)

FAILED_LOG_IN_MESSAGE = "The provided credentials do not match our records."


@method_decorator(never_cache, name="dispatch")
class LogInView(LoginProhibitedMixin, View):
    """Session login for anonymous users; signed-in users go to the feed."""

    template_name = "auth/log_in.html"
    redirect_when_logged_in_url = settings.REDIRECT_URL_WHEN_LOGGED_IN

    def dispatch(self, request, *args, **kwargs):
        self.next = self._safe_next(request.POST.get("next") or request.GET.get("next"))
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        return self._render(LogInForm())

    def post(self, request):
        form = LogInForm(request.POST)
        user = form.get_user()
        if user is None:
            logger.info("Failed log in for username %r", request.POST.get("username", ""))
            messages.error(request, FAILED_LOG_IN_MESSAGE)
            return self._render(form)
        login(request, user)
        return redirect(self.next or reverse(settings.REDIRECT_URL_WHEN_LOGGED_IN))

    def _render(self, form):
        return render(self.request, self.template_name, {"form": form, "next": self.next})

    def _safe_next(self, url):
        """Drop `next` targets pointing off this site."""
        if url and url_has_allowed_host_and_scheme(
            url, allowed_hosts={self.request.get_host()}, require_https=self.request.is_secure()
        ):
            return url
        return None
