import logging
from functools import wraps

from django.contrib.auth.decorators import login_required
from django.core.exceptions import ImproperlyConfigured, PermissionDenied
from django.http import Http404, JsonResponse
from django.shortcuts import redirect

from feed.views.view_utils import wants_json

logger = logging.getLogger(__name__)


def json_error_boundary(message, *, key="error"):
    """
    Turn unexpected exceptions raised by a view into a logged 500 response.

    `Http404` and `PermissionDenied` are re-raised so Django renders them as
    usual; anything else is logged with its traceback and answered with
    `{key: message}` and status 500.
    """
    def decorator(view_function):
        @wraps(view_function)
        def modified_view_function(request, *args, **kwargs):
            try:
                return view_function(request, *args, **kwargs)
            except (Http404, PermissionDenied):
                raise
            except Exception:
                logger.exception("%s (view=%s)", message, view_function.__name__)
                return JsonResponse({key: message}, status=500)
        return modified_view_function
    return decorator


def json_login_required(view_function):
    """
    `login_required` that answers JSON clients with a 401 body.

    Browsers are still redirected to the login page.
    """
    redirecting_view = login_required(view_function)

    @wraps(view_function)
    def modified_view_function(request, *args, **kwargs):
        if not request.user.is_authenticated and wants_json(request):
            return JsonResponse({"message": "Unauthenticated."}, status=401)
        return redirecting_view(request, *args, **kwargs)
    return modified_view_function


class LoginProhibitedMixin:
    """
    Keep signed-in users away from anonymous-only class-based views.

    Set `redirect_when_logged_in_url` (a URL or a route name) or override
    `get_redirect_when_logged_in_url()`.
    """

    redirect_when_logged_in_url = None

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            return redirect(self.get_redirect_when_logged_in_url())
        return super().dispatch(request, *args, **kwargs)

    def get_redirect_when_logged_in_url(self):
        if self.redirect_when_logged_in_url is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} needs 'redirect_when_logged_in_url' "
                "or an override of 'get_redirect_when_logged_in_url()'."
            )
        return self.redirect_when_logged_in_url
