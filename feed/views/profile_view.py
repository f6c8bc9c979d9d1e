"""Profile page views: the current user's posts and account details."""

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods

from feed.forms import ProfileForm
from feed.services import ProfileService
from feed.views.decorators import json_error_boundary, json_login_required
from feed.views.view_utils import request_data, validation_error_response, wants_json

profile_service_factory = ProfileService


def _render_profile(request, service, form, status=200):
    return render(
        request,
        "profile/show.html",
        {"posts": service.posts(), "form": form, "profile_user": service.user},
        status=status,
    )


@json_login_required
@require_GET
def profile_show(request):
    """Render the current user's profile with their posts."""
    service = profile_service_factory(request.user)
    if wants_json(request):
        return JsonResponse({"posts": {"data": service.posts_payload()}})
    return _render_profile(request, service, ProfileForm(instance=request.user))


@json_login_required
@require_http_methods(["POST", "PUT"])
@json_error_boundary("Failed to update profile")
def profile_update(request):
    """Update the current user's name and email."""
    service = profile_service_factory(request.user)
    form = ProfileForm(request_data(request), instance=request.user)
    if not form.is_valid():
        if wants_json(request):
            return validation_error_response(form)
        return _render_profile(request, service, form, status=422)

    service.update_from_form(form)
    if wants_json(request):
        return JsonResponse({"user": service.user_payload(), "message": "Profile updated successfully"})
    messages.success(request, "Profile updated successfully")
    return redirect(request.META.get("HTTP_REFERER") or reverse("profile_show"))
