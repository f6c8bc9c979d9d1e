import json

from django.core.exceptions import PermissionDenied
from django.http import JsonResponse, QueryDict

VALIDATION_MESSAGE = "The given data was invalid."


def wants_json(request):
    """Return True when the client's preferred response type is JSON."""
    accept = request.headers.get("Accept", "")
    preferred = accept.split(",")[0].split(";")[0].strip().lower()
    if preferred.endswith("/json") or preferred.endswith("+json"):
        return True
    return request.headers.get("x-requested-with") == "XMLHttpRequest"


def request_data(request):
    """Return submitted fields for form-encoded, multipart or JSON bodies."""
    content_type = (request.content_type or "").lower()
    if content_type == "application/json":
        try:
            payload = json.loads(request.body or b"{}")
        except ValueError:
            payload = {}
        return payload if isinstance(payload, dict) else {}
    if request.method == "POST":
        return request.POST
    return QueryDict(request.body)


def validation_error_response(form):
    """422 JSON response listing the form's field errors."""
    errors = {field: [str(message) for message in messages] for field, messages in form.errors.items()}
    return JsonResponse({"message": VALIDATION_MESSAGE, "errors": errors}, status=422)


def forbidden(request, message="Unauthorized"):
    """403 as JSON for API-style clients, Django's 403 page otherwise."""
    if wants_json(request):
        return JsonResponse({"error": message}, status=403)
    raise PermissionDenied(message)
